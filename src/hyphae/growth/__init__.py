from hyphae.growth.entity import GrowthEntity  # noqa: F401
from hyphae.growth.state import GrowthPhase, HyphaeState  # noqa: F401
from hyphae.growth.system import GrowthSystem  # noqa: F401
