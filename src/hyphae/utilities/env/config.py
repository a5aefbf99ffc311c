from hyphae.utilities.env.growth import GrowthConfiguration
from hyphae.utilities.env.rendering import RenderingConfiguration
from hyphae.utilities.env.system import SystemConfiguration


class Configuration(
    SystemConfiguration,
    GrowthConfiguration,
    RenderingConfiguration,
):
    """Aggregate environment configuration helpers."""
