"""Creatures of several species fighting through a battle-arena tournament."""

from __future__ import annotations

import argparse
import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

DEFAULT_STRENGTH = 10
DEFAULT_HITPOINTS = 10
DEMONIC_BONUS = 50
_BANNER = "**********************************"


class Creature(ABC):
    """A creature with a strength that bounds its damage and hitpoints it can lose.

    ``rng`` supplies the random draws and ``out`` receives the attack messages;
    when ``out`` is not given, messages go to the current standard output.
    Every concrete kind names its ``species``.
    """

    def __init__(
        self,
        strength: int = DEFAULT_STRENGTH,
        hitpoints: int = DEFAULT_HITPOINTS,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.strength = strength
        self.hitpoints = hitpoints
        self._rng = random.Random() if rng is None else rng
        self._out = out

    @property
    @abstractmethod
    def species(self) -> str:
        """The name of the creature's kind."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(strength={self.strength}, "
            f"hitpoints={self.hitpoints})"
        )

    @property
    def alive(self) -> bool:
        return self.hitpoints > 0

    def _say(self, text: str) -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def _chance(self, sides: int) -> bool:
        """Return True with probability ``1 / sides``."""
        return self._rng.randrange(sides) == 0

    def _roll(self) -> int:
        if self.strength <= 0:
            raise ValueError(f"strength must be positive, got {self.strength}")
        return self._rng.randrange(self.strength) + 1

    def damage(self) -> int:
        """Announce and return a random damage from 1 to the creature's strength."""
        amount = self._roll()
        self._say(f"The {self.species} attacks for {amount} points!")
        return amount


class Human(Creature):
    """A plain fighter."""

    species = "Human"


class Elf(Creature):
    """A fighter whose attack is doubled by magic half of the time."""

    species = "Elf"

    def damage(self) -> int:
        """Announce and return an attack, doubled on a magical hit."""
        amount = super().damage()
        if self._chance(2):
            self._say(f"Magical attack inflicts {amount} additional damage points!")
            amount *= 2
        return amount


class Demon(Creature):
    """A fighter that adds a demonic bonus to one attack in four."""

    species = "Demon"

    def damage(self) -> int:
        """Announce and return an attack, with a bonus on a demonic hit."""
        amount = super().damage()
        if self._chance(4):
            amount += DEMONIC_BONUS
            self._say(
                f"Demonic attack inflicts {DEMONIC_BONUS} additional damage points!"
            )
        return amount


class Cyberdemon(Demon):
    """A demon with no powers beyond the demonic bonus."""

    species = "Cyberdemon"


class Balrog(Demon):
    """A demon that strikes a second time with its speed."""

    species = "Balrog"

    def damage(self) -> int:
        """Announce and return a demonic attack plus a speed attack."""
        amount = super().damage()
        extra = self._roll()
        self._say(f"Balrog speed attack inflicts {extra} additional damage points!")
        return amount + extra


def battle_arena(first: Creature, second: Creature) -> None:
    """Let both creatures strike each other at once until one or both fall."""
    while True:
        damage_first = first.damage()
        damage_second = second.damage()
        second.hitpoints -= damage_first
        first.hitpoints -= damage_second
        if not (first.alive and second.alive):
            return


def do_battle(champion: Creature, contender: Creature) -> Creature | None:
    """Fight a battle and return the winner, or None if both fell.

    The winner's hitpoints are restored to what they were before the battle.
    """
    start = {id(champion): champion.hitpoints, id(contender): contender.hitpoints}
    battle_arena(champion, contender)
    if champion.alive == contender.alive:
        return None
    winner = champion if champion.alive else contender
    winner.hitpoints = start[id(winner)]
    return winner


def run_tournament(
    creatures: Sequence[Creature], out: TextIO | None = None
) -> Creature | None:
    """Let each creature in turn challenge the champion; return the last champion.

    The first creature starts as champion. After a tie the creature following
    the contender becomes champion without fighting. Returns None when no
    creature is left standing.
    """
    if not creatures:
        raise ValueError("a tournament needs at least one creature")
    stream = out if out is not None else sys.stdout
    count = len(creatures)
    champion: Creature | None = creatures[0]
    contender = 1
    while contender < count:
        print(_BANNER, file=stream)
        print(f"BattleArena battle#{contender}", file=stream)
        print(_BANNER, file=stream)
        assert champion is not None
        winner = do_battle(champion, creatures[contender])
        if winner is None:
            print("Tie! Both creatures are defeated. ", end="", file=stream)
            if contender == count - 1:
                print("All creatures defeated...no champion! \n", file=stream)
                champion = None
            else:
                champion = creatures[contender + 1]
                print(f"{champion.species} is the new champion!\n", file=stream)
            contender += 2
        else:
            champion = winner
            print(f"{winner.species} wins!\n\n", file=stream)
            contender += 1
    return champion


def main(argv: list[str] | None = None) -> int:
    """Run a tournament among a Balrog, an Elf, a Cyberdemon and a Human."""
    parser = argparse.ArgumentParser(description="Run a creature battle tournament.")
    parser.add_argument("--seed", type=int, help="seed for the random attacks")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    elf = Elf(24, 50, rng=rng)
    balrog = Balrog(10, 50, rng=rng)
    human = Human(100, 50, rng=rng)
    cyberdemon = Cyberdemon(50, 50, rng=rng)
    run_tournament([balrog, elf, cyberdemon, human], sys.stdout)
    return 0