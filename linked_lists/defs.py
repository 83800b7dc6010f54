import operator
from string import Formatter
from pydantic import BaseModel, field_validator

__all__ = ["NODE_FMT", "CHAIN_END", "RenderSettings", "DEFAULT_RENDER"]
__all__ += ["check_index"]

# Rendering used by LinkedList.to_s().
NODE_FMT = "( {} ) -> "
CHAIN_END = "nil"

####################################################################################
class RenderSettings(BaseModel):
    node_fmt: str = NODE_FMT
    chain_end: str = CHAIN_END

    @field_validator("node_fmt")
    @classmethod
    def one_placeholder(cls, v: str) -> str:
        # Each node is formatted with exactly one bare {} field.
        try:
            fields = [
                (name, spec, conv)
                for _, name, spec, conv in Formatter().parse(v)
                if name is not None
            ]
        except ValueError as e:
            raise ValueError(f"node_fmt is not a valid format: {e}") from e

        if fields != [("", "", None)]:
            raise ValueError("node_fmt needs exactly one {} placeholder")
        return v

DEFAULT_RENDER = RenderSettings()

def check_index(index):
    """Return index as a plain int. Raises TypeError for non integers."""
    # bool is an int subclass but never a position.
    if isinstance(index, bool):
        raise TypeError("index must be an int, not bool")

    return operator.index(index)
