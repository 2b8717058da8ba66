"""Elementary particles and the interactions between photons and electrons."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod

ELECTRON_REST_MASS = 0.511
"""Electron rest mass in MeV."""

MAX_RADIATED_FRACTION = 0.99
"""Upper bound of the share of kinetic energy an electron may radiate at once."""


class ParticleError(Exception):
    """Base class for errors raised by particle interactions."""


class NoKineticEnergyError(ParticleError):
    """Raised when an electron at rest is asked to radiate."""


class InsufficientEnergyError(ParticleError):
    """Raised when a photon is too weak for pair production."""


def _fmt(value: float) -> str:
    return f"{value:g}"


class Particle(ABC):
    """A particle with a rest mass and a total energy, both in MeV."""

    def __init__(self, rest_mass: float, energy: float) -> None:
        self.rest_mass = rest_mass
        self.energy = energy

    def describe(self) -> str:
        """Return a one-line summary of the particle."""
        return (
            f"Particle: Rest Mass = {_fmt(self.rest_mass)} MeV, "
            f"Energy = {_fmt(self.energy)} MeV"
        )

    @abstractmethod
    def copy(self) -> Particle:
        """Return an independent copy of the particle."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rest_mass={self.rest_mass!r}, "
            f"energy={self.energy!r})"
        )


class Photon(Particle):
    """A massless particle that may carry electrons produced from it."""

    def __init__(self, energy: float) -> None:
        super().__init__(0.0, energy)
        self.associated_electrons: list[Electron] = []

    def describe(self) -> str:
        return f"Photon: Energy = {_fmt(self.energy)} MeV"

    def copy(self) -> Photon:
        """Return a photon with the same energy and no associated electrons."""
        twin = Photon(self.energy)
        twin.rest_mass = self.rest_mass
        return twin

    def __repr__(self) -> str:
        return f"Photon(energy={self.energy!r})"


class Electron(Particle):
    """An electron that keeps a record of the photons it has radiated."""

    def __init__(self, rest_mass: float, energy: float) -> None:
        super().__init__(rest_mass, energy)
        self.radiated_photons: list[Photon] = []

    def describe(self) -> str:
        return (
            f"Electron: Energy = {_fmt(self.energy)} MeV, "
            f"Rest Mass = {_fmt(self.rest_mass)} MeV"
        )

    def copy(self) -> Electron:
        """Return an electron with the same mass and energy and no radiation history."""
        return Electron(self.rest_mass, self.energy)

    def kinetic_energy(self) -> float:
        """Return the total energy less the rest mass."""
        return self.energy - self.rest_mass


def radiate(electron: Electron, rng: random.Random | None = None) -> Photon:
    """Emit a photon carrying a random share of the electron's kinetic energy.

    The share is drawn uniformly from [0, 0.99). The electron loses that energy
    and records a photon of the same energy among its radiated photons.
    """
    kinetic = electron.kinetic_energy()
    if kinetic <= 0:
        raise NoKineticEnergyError("Electron has no kinetic energy to radiate.")
    generator = rng if rng is not None else random.Random()
    fraction = generator.uniform(0.0, MAX_RADIATED_FRACTION)
    photon_energy = fraction * kinetic
    electron.energy -= photon_energy
    electron.radiated_photons.append(Photon(photon_energy))
    return Photon(photon_energy)


def photoelectric_effect(photon: Photon) -> float:
    """Return the energy the photon hands over in the photoelectric effect."""
    return photon.energy


def compton_effect(photon: Photon, theta: float) -> float:
    """Scatter the photon off an electron by angle ``theta`` (radians).

    The photon's energy is updated in place and the new energy is returned.
    """
    energy = photon.energy
    photon.energy = energy / (
        1 + (energy / ELECTRON_REST_MASS) * (1 - math.cos(theta))
    )
    return photon.energy


def pair_production(photon: Photon) -> list[Electron]:
    """Turn the photon's energy into two electrons.

    Each electron gets the rest mass plus half the photon's energy. Raises
    InsufficientEnergyError unless the photon has more than twice the electron
    rest mass.
    """
    if photon.energy <= 2 * ELECTRON_REST_MASS:
        raise InsufficientEnergyError(
            "Photon energy insufficient for pair production."
        )
    total = ELECTRON_REST_MASS + photon.energy / 2.0
    return [Electron(ELECTRON_REST_MASS, total), Electron(ELECTRON_REST_MASS, total)]