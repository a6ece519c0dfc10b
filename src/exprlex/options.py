"""
Lexer Configuration
===================

Options controlling how the lexer reacts to input it cannot classify.
Configuration can come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags (the exprlex CLI overrides the environment)

Unrecognized Character Policies
-------------------------------
| Policy | Behaviour                                                     |
|--------|---------------------------------------------------------------|
| error  | raise UnrecognizedCharacterError (default)                    |
| skip   | log a warning, drop the character, keep scanning              |
| stop   | end the token stream as if the input had ended there          |

Malformed number literals always raise MalformedNumberError, whatever
the policy.
"""

from dataclasses import dataclass
from enum import Enum
import logging
import os

logger = logging.getLogger(__name__)

# Environment variable read by LexerOptions.from_env()
ENV_ON_UNRECOGNIZED = "EXPRLEX_ON_UNRECOGNIZED"


class UnrecognizedPolicy(str, Enum):
    """What the lexer does with a character no token can start with."""

    ERROR = "error"
    SKIP = "skip"
    STOP = "stop"


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        on_unrecognized: Policy applied to unclassifiable characters
    """
    on_unrecognized: UnrecognizedPolicy = UnrecognizedPolicy.ERROR

    def __post_init__(self):
        # Accept plain strings such as "skip"
        self.on_unrecognized = UnrecognizedPolicy(self.on_unrecognized)

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            EXPRLEX_ON_UNRECOGNIZED: error, skip or stop (case-insensitive)

        Invalid values are logged and the default is kept.
        """
        options = cls()

        if policy := os.environ.get(ENV_ON_UNRECOGNIZED):
            try:
                options.on_unrecognized = UnrecognizedPolicy(policy.strip().lower())
            except ValueError:
                logger.warning(
                    f"Ignoring {ENV_ON_UNRECOGNIZED}={policy!r}: "
                    f"expected one of {', '.join(p.value for p in UnrecognizedPolicy)}"
                )

        return options
