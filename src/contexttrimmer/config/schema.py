"""Pydantic schema for trimmer options."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict

from .errors import InvalidBudgetError, UnknownOptionError

class TrimmerConfig(BaseModel):
    """Complete option set for ContextTrimmer. Names outside this set are rejected."""

    model_config = ConfigDict(
        extra="forbid",  # Strict validation
        validate_assignment=True,
        populate_by_name=True,
    )

    remove_short_words: bool = Field(default=False, alias="removeShortWords",
                                     description="Drop purely alphabetic words of min_word_length letters or fewer")
    min_word_length: int = Field(default=2, ge=0, alias="minWordLength",
                                 description="Threshold for short-word removal")
    remove_extraneous: bool = Field(default=False, alias="removeExtraneous",
                                    description="Strip brackets, braces, angle brackets and asterisks")
    max_tokens: int = Field(default=0, alias="maxTokens",
                            description="Token budget per segment; must be set to a positive value before trimming")

    @classmethod
    def option_names(cls) -> Dict[str, str]:
        """Map every accepted option name (field name or alias) to its field name."""
        names = {}
        for field_name, info in cls.model_fields.items():
            names[field_name] = field_name
            if info.alias:
                names[info.alias] = field_name
        return names

    @classmethod
    def resolve_option(cls, name: str) -> str:
        """
        Resolve an option name or alias to its field name.

        Raises:
            UnknownOptionError: If the name is not a recognized option
        """
        try:
            return cls.option_names()[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def require_budget(self) -> int:
        """
        Return the token budget, checking it is usable.

        Raises:
            InvalidBudgetError: If max_tokens is zero or negative
        """
        if self.max_tokens <= 0:
            raise InvalidBudgetError(self.max_tokens)
        return self.max_tokens
