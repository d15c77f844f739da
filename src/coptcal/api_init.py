"""Registry bootstrap (import side-effect)."""
from .attributes import standard as _standard_attributes  # noqa: F401
from .api import set_registry
from .bootstrap import build_registry

set_registry(build_registry())
