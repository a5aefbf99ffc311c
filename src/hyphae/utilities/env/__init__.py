"""Environment configuration helpers."""

from hyphae.utilities.env.config import Configuration as Configuration
