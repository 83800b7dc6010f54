from .defs import *
from .node import *
from .linked_list import *
