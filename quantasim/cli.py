"""Command-line simulation: decay nuclei and send their photons through matter."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Iterable
from typing import TextIO

from quantasim.nuclei import (
    AlreadyDecayedError,
    Nucleus,
    RadioactiveNucleus,
    StableNucleus,
)
from quantasim.particles import (
    InsufficientEnergyError,
    NoKineticEnergyError,
    Photon,
    compton_effect,
    pair_production,
    photoelectric_effect,
    radiate,
)

SCATTERING_ANGLE = math.radians(60.0)
"""Angle used for Compton scattering in the simulation."""


def default_nuclei() -> list[Nucleus]:
    """Return the nuclei the simulation starts from by default."""
    return [
        RadioactiveNucleus(22.0, 11, "Na", 2.6),
        RadioactiveNucleus(137.0, 55, "Cs", 30.0),
        RadioactiveNucleus(60.0, 27, "Co", 5.3),
        StableNucleus(56.0, 26, "Fe"),
    ]


def _decay_all(nuclei: Iterable[Nucleus], out: TextIO) -> list[Photon]:
    photons: list[Photon] = []
    for nucleus in nuclei:
        if isinstance(nucleus, RadioactiveNucleus):
            print(f"\nDecaying nucleus: {nucleus.nucleus_type}", file=out)
            try:
                emitted = nucleus.decay()
            except AlreadyDecayedError as exc:
                print(exc, file=out)
                continue
            for photon in emitted:
                print(photon.describe(), file=out)
            photons.extend(emitted)
        else:
            print(
                f"\nStable nucleus: {nucleus.nucleus_type} does not decay.",
                file=out,
            )
    return photons


def _interact(photon: Photon, out: TextIO, rng: random.Random) -> None:
    print(f"\nPhoton before interaction: {photon.describe()}", file=out)
    try:
        electrons = pair_production(photon)
    except InsufficientEnergyError:
        print("Pair production not possible for this photon.", file=out)
    else:
        print(f"Pair production produced {len(electrons)} electrons.", file=out)
        electron = electrons[0]
        print(f"\nElectron before radiation: {electron.describe()}", file=out)
        try:
            radiated = radiate(electron, rng)
        except NoKineticEnergyError as exc:
            print(exc, file=out)
        else:
            print(f"Radiated photon: {radiated.describe()}", file=out)
        print(f"Electron after radiation: {electron.describe()}", file=out)

    energy = photoelectric_effect(photon)
    print(f"Photoelectric effect: Photon energy = {energy:g} MeV", file=out)

    compton_effect(photon, SCATTERING_ANGLE)
    print(f"After Compton effect: {photon.describe()}", file=out)


def run_simulation(
    nuclei: Iterable[Nucleus],
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> list[Photon]:
    """Decay the nuclei, then pass every emitted photon through the interactions.

    Each photon is tried for pair production (the first electron produced then
    radiates), reports its photoelectric energy and is Compton scattered. The
    report goes to ``out``; the photons, after scattering, are returned.
    """
    stream = out if out is not None else sys.stdout
    generator = rng if rng is not None else random.Random()
    photons = _decay_all(nuclei, stream)
    for photon in photons:
        _interact(photon, stream, generator)
    return photons


def main(argv: list[str] | None = None) -> int:
    """Run the default simulation and print its report."""
    parser = argparse.ArgumentParser(
        prog="quantasim",
        description="Decay a set of nuclei and follow their photons through matter.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the random radiation fractions",
    )
    args = parser.parse_args(argv)
    run_simulation(default_nuclei(), sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())