from tree_to_text.models.config import DEFAULT_CONFIG, DecoderConfig, Grammar
from tree_to_text.models.errors import *  # noqa: F403
from tree_to_text.models.errors import __all__ as _errors_all
from tree_to_text.models.tree import State, TreeDecoder, decode_tree, tree_to_text

__all__ = [
    "DEFAULT_CONFIG",
    "DecoderConfig",
    "Grammar",
    "State",
    "TreeDecoder",
    "decode_tree",
    "tree_to_text",
    *_errors_all,
]
