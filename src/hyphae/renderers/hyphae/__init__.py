from hyphae.renderers.hyphae.provider import \
    HyphaeStateProvider  # noqa: F401
from hyphae.renderers.hyphae.renderer import HyphaeRenderer  # noqa: F401
from hyphae.renderers.hyphae.state import HyphaeSnapshot  # noqa: F401
