from linked_lists import LinkedList

def prepend_walk_benchmark():
    M = 100_000

    lst = LinkedList()
    for j in range(M):
        lst.prepend(j)

    total = 0
    for value in lst:
        total += value

    return total


def positional_benchmark():
    M = 500

    lst = LinkedList()
    for j in range(M):
        lst.append(j)

    for j in range(0, M, 2):
        lst.insert_at(-j, j)

    while lst:
        lst.remove_at(lst.size() // 2)


def test_prepend_walk_benchmark(benchmark) -> None:
    benchmark(prepend_walk_benchmark)


def test_positional_benchmark(benchmark) -> None:
    benchmark(positional_benchmark)


if __name__ == "__main__":
    prepend_walk_benchmark()
    positional_benchmark()
