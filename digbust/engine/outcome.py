"""
Dig & Bust - Outcome Engine

Decides what a single dig turns up given how many digs have already been
taken. Checks run in a fixed order, each against its own fresh draw:

1. Jackpot (only once the threshold is reached, odds ramp up to a cap)
2. Bust (odds grow with every attempt, uncapped)
3. Gem (fixed odds, uniform reward between the gem bounds)
4. Dirt

All methods are stateless class methods. Randomness is injected.
"""

import random

from digbust.engine.base import DigConfig, DigOutcome, DigResult, RandomSource
from digbust.engine.validators import validate_attempts


class OutcomeEngine:
    """
    Stateless engine for dig outcomes.

    All methods are class methods operating on immutable data.
    The only effect is calling the injected random source.
    """

    @classmethod
    def jackpot_chance(cls, attempts_so_far: int, config: DigConfig) -> float:
        """Jackpot probability for the next dig.

        Args:
            attempts_so_far: Digs taken before this one
            config: Balancing constants

        Returns:
            0.0 below the threshold, otherwise the ramped chance capped at
            ``jackpot_max_chance``
        """
        if attempts_so_far < config.jackpot_threshold:
            return 0.0
        over = attempts_so_far - config.jackpot_threshold
        return min(
            config.jackpot_base_chance + over * config.jackpot_increment,
            config.jackpot_max_chance,
        )

    @classmethod
    def bust_chance(cls, attempts_so_far: int, config: DigConfig) -> float:
        """Bust probability for the next dig.

        Uses the attempt count before this dig is counted. Not capped: a
        value of 1.0 or more means a guaranteed bust.
        """
        return config.bust_base_chance + attempts_so_far * config.bust_increment

    @classmethod
    def gem_reward(cls, config: DigConfig, rng: RandomSource) -> int:
        """Uniform integer in ``[gem_min_points, gem_max_points]``."""
        span = config.gem_max_points - config.gem_min_points + 1
        reward = config.gem_min_points + int(rng() * span)
        return min(reward, config.gem_max_points)

    @classmethod
    def decide(
        cls,
        attempts_so_far: int,
        config: DigConfig,
        rng: RandomSource = random.random,
    ) -> DigResult:
        """Classify the next dig.

        Args:
            attempts_so_far: Digs taken before this one
            config: Balancing constants
            rng: Uniform [0, 1) source, called once per check

        Returns:
            DigResult with the outcome and its reward
        """
        validate_attempts(attempts_so_far)

        # Once unlocked, jackpot preempts bust
        if attempts_so_far >= config.jackpot_threshold:
            if rng() < cls.jackpot_chance(attempts_so_far, config):
                return DigResult(DigOutcome.JACKPOT, config.jackpot_bonus)

        if rng() < cls.bust_chance(attempts_so_far, config):
            return DigResult(DigOutcome.BUST, 0)

        if rng() < config.gem_chance:
            return DigResult(DigOutcome.GEM, cls.gem_reward(config, rng))

        return DigResult(DigOutcome.DIRT, 0)
