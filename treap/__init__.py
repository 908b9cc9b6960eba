from .tree import Treap
from .priority import MAX_PRIORITY, PriorityGenerator
from .util import InvalidArgument
