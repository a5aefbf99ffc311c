from hyphae.grammar.depth import max_depth  # noqa: F401
from hyphae.grammar.engine import match_rule, rewrite  # noqa: F401
from hyphae.grammar.rules import HYPHAE_RULES, Rule, RuleSet  # noqa: F401
from hyphae.grammar.turns import (generate_random_axiom,  # noqa: F401
                                  turn_string)
