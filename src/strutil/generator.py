import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .exc import TooFewCharsError, TooManyCharsError
from .policy import CharsetRule, PasswordPolicy, default_rules

__all__ = ("PasswordGenerator", "PasswordGeneratorBuilder")


logger = logging.getLogger(__name__)


class PasswordGenerator:
    """
    Generates random passwords that satisfy the quota of every charset rule and
    validates existing passwords against the same rules.

    Rules are used in the given order: their minimums are drawn first, then the
    remaining length is filled round-robin until every rule hits its maximum.

    Args:
        rules: The charset rules. The default full charset rule is installed when
            none are given.
        rng: The random source. Defaults to :class:`random.SystemRandom`; pass a
            seeded :class:`random.Random` for reproducible output.
    """

    __slots__ = ("_rules", "_rng")

    def __init__(
        self,
        rules: Iterable[CharsetRule] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rules = tuple(rules) or default_rules()
        self._rng = rng if rng is not None else random.SystemRandom()

    @classmethod
    def from_policy(
        cls, policy: PasswordPolicy, rng: Optional[random.Random] = None
    ) -> "PasswordGenerator":
        return cls(rules=policy.rules, rng=rng)

    @property
    def rules(self) -> tuple[CharsetRule, ...]:
        return self._rules

    def generate(self, required_length: int) -> str:
        if required_length < 0:
            raise ValueError(
                "required_length must be non-negative, got %d" % required_length
            )

        chars: list[str] = []
        used = [0] * len(self._rules)

        for idx, rule in enumerate(self._rules):
            chars.extend(self._rng.choice(rule.charset) for _ in range(rule.min_count))
            used[idx] = rule.min_count

        while len(chars) < required_length:
            added = False
            for idx, rule in enumerate(self._rules):
                if len(chars) >= required_length:
                    break
                if rule.max_count and used[idx] >= rule.max_count:
                    continue
                chars.append(self._rng.choice(rule.charset))
                used[idx] += 1
                added = True
            if not added:
                break

        if len(chars) < required_length:
            logger.warning(
                "charset maximums allow only %d of %d required characters",
                len(chars),
                required_length,
            )

        self._rng.shuffle(chars)
        logger.debug("generated password of length %d", len(chars))
        return "".join(chars)

    def validate(self, password: str) -> None:
        """
        Raises:
            TooFewCharsError: The password uses fewer characters of a charset than
                its minimum.
            TooManyCharsError: The password uses more characters of a charset than
                its maximum.
        """
        used = [0] * len(self._rules)
        for char in password:
            for idx, rule in enumerate(self._rules):
                if char in rule.charset:
                    used[idx] += 1

        for rule, count in zip(self._rules, used):
            if rule.min_count and count < rule.min_count:
                raise TooFewCharsError.from_count(rule.charset, rule.min_count, count)
            if rule.max_count and count > rule.max_count:
                raise TooManyCharsError.from_count(
                    rule.charset, rule.max_count, count
                )

    def is_valid(self, password: str) -> bool:
        try:
            self.validate(password)
        except (TooFewCharsError, TooManyCharsError) as ex:
            logger.debug("password rejected: %s", ex)
            return False
        return True


@dataclass(slots=True)
class PasswordGeneratorBuilder:
    """
    Collects charset rules in order before building a :class:`PasswordGenerator`.

    Example::

        generator = (
            PasswordGeneratorBuilder()
            .charset(2, 0, CHARS_DIGITS)
            .charset(1, 3, CHARS_SYMBOLS)
            .build()
        )
    """

    rules: list[CharsetRule] = field(default_factory=list)

    def charset(
        self, min_count: int, max_count: int, chars: str
    ) -> "PasswordGeneratorBuilder":
        self.rules.append(
            CharsetRule(charset=chars, min_count=min_count, max_count=max_count)
        )
        return self

    def build(self, rng: Optional[random.Random] = None) -> PasswordGenerator:
        return PasswordGenerator(rules=self.rules, rng=rng)
