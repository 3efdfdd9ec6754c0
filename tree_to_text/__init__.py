from tree_to_text.models import *  # noqa: F403
from tree_to_text.models import __all__  # noqa: F401
