from hyphae.turtle.backend import StrokeStyle, TurtleBackend  # noqa: F401
from hyphae.turtle.interpreter import (TurtleSettings, interpret,  # noqa: F401
                                       render)
