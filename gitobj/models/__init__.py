from .blob import *  # noqa: F403
from .git import *  # noqa: F403
from .storage import *  # noqa: F403
