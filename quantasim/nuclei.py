"""Atomic nuclei, stable and radioactive, and the photons radioactive ones emit."""

from __future__ import annotations

import warnings

from quantasim.particles import Photon

DECAY_SPECTRA: dict[str, tuple[float, ...]] = {
    "Cs": (0.661,),
    "Na": (1.2745, 0.511, 0.511),
    "Co": (1.173, 1.333),
}
"""Photon energies in MeV emitted by the decay of each supported nucleus type.

The two 0.511 MeV photons of sodium come from the positron annihilating with a
nearby electron straight after it is produced.
"""


class AlreadyDecayedError(Exception):
    """Raised when a radioactive nucleus that has decayed is asked to decay again."""


def _fmt(value: float) -> str:
    return f"{value:g}"


class Nucleus:
    """A nucleus with an atomic mass, an atomic number and a type label."""

    def __init__(self, atomic_mass: float, atomic_number: int, nucleus_type: str) -> None:
        self._atomic_mass = abs(atomic_mass)
        self.atomic_number = abs(int(atomic_number))
        self.nucleus_type = nucleus_type

    @property
    def atomic_mass(self) -> float:
        """Atomic mass; assigning a non-positive value warns and stores its absolute value."""
        return self._atomic_mass

    @atomic_mass.setter
    def atomic_mass(self, mass: float) -> None:
        if mass <= 0:
            warnings.warn(
                "Mass cannot be lower than zero. Absolute value is taken",
                RuntimeWarning,
                stacklevel=2,
            )
        self._atomic_mass = abs(mass)

    def _summary(self) -> str:
        return (
            f"Nucleus: {self.nucleus_type}, "
            f"Atomic Number: {self.atomic_number}, "
            f"Atomic Mass: {_fmt(self.atomic_mass)}"
        )

    def describe(self) -> str:
        """Return a one-line summary of the nucleus."""
        return self._summary()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(atomic_mass={self.atomic_mass!r}, "
            f"atomic_number={self.atomic_number!r}, "
            f"nucleus_type={self.nucleus_type!r})"
        )


class StableNucleus(Nucleus):
    """A nucleus that does not decay."""

    def describe(self) -> str:
        return f"Stable {self._summary()}"


class RadioactiveNucleus(Nucleus):
    """A nucleus with a half-life that decays once, emitting photons."""

    def __init__(
        self,
        atomic_mass: float,
        atomic_number: int,
        nucleus_type: str,
        half_life: float,
    ) -> None:
        super().__init__(atomic_mass, atomic_number, nucleus_type)
        self.half_life = half_life
        self._decayed = False
        self.emitted_photons: list[Photon] = []

    @property
    def decayed(self) -> bool:
        """Whether the nucleus has already decayed."""
        return self._decayed

    def decay(self) -> list[Photon]:
        """Decay the nucleus and return the photons it emits.

        Raises AlreadyDecayedError if the nucleus has decayed before. A nucleus
        type with no known decay mode warns, is marked as decayed and emits
        nothing. The first emitted photon is kept in ``emitted_photons``.
        """
        if self._decayed:
            raise AlreadyDecayedError("Nucleus has already decayed.")
        energies = DECAY_SPECTRA.get(self.nucleus_type)
        if energies is None:
            warnings.warn(
                f"Decay mode for {self.nucleus_type} not implemented.",
                RuntimeWarning,
                stacklevel=2,
            )
            energies = ()
        photons = [Photon(energy) for energy in energies]
        self._decayed = True
        if photons:
            self.emitted_photons.append(photons[0].copy())
        return photons

    def copy(self) -> RadioactiveNucleus:
        """Return an independent copy, including copies of the emitted photons."""
        twin = RadioactiveNucleus(
            self.atomic_mass, self.atomic_number, self.nucleus_type, self.half_life
        )
        twin._decayed = self._decayed
        twin.emitted_photons = [photon.copy() for photon in self.emitted_photons]
        return twin

    def describe(self) -> str:
        return (
            f"Radioactive {self._summary()}, "
            f"Half-life: {_fmt(self.half_life)} s"
        )