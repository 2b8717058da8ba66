# quantasim

quantasim is a small simulation of radioactive nuclei and the particles they
emit. It covers:

- photons and electrons, with energies in MeV (`quantasim.particles`)
- stable and radioactive nuclei, with decay modes for Na, Cs and Co
  (`quantasim.nuclei`)
- radiation from a moving electron
- the photoelectric effect
- Compton scattering
- pair production
- a command that runs a fixed scenario (`quantasim.cli`)

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
quantasim
quantasim --seed 42
```

The command runs the default scenario and prints a report to standard output:

1. It builds three radioactive nuclei, Na (22.0, Z=11, half-life 2.6 s),
   Cs (137.0, Z=55, 30.0 s) and Co (60.0, Z=27, 5.3 s), and one stable
   nucleus, Fe (56.0, Z=26).
2. It decays each radioactive nucleus and prints the photons that come out.
   The stable nucleus is reported as not decaying.
3. It tries pair production on each photon. When the photon has enough energy,
   the first of the two electrons radiates a photon, and the report shows the
   electron before and after.
4. It prints the photon's photoelectric energy.
5. It Compton-scatters the photon at 60° and prints its new energy.

Each radiated photon takes a random fraction of the electron's kinetic energy.
Without `--seed` the radiated energies differ from run to run. With
`--seed N` they are the same each time.

The same command is available as `python -m quantasim.cli`.

## Library use

```python
import math
import random

from quantasim.particles import (
    Photon,
    compton_effect,
    pair_production,
    photoelectric_effect,
    radiate,
)
from quantasim.nuclei import RadioactiveNucleus, StableNucleus

cobalt = RadioactiveNucleus(60.0, 27, "Co", 5.3)
photons = cobalt.decay()              # Photon(1.173), Photon(1.333)
print(cobalt.describe())
# Radioactive Nucleus: Co, Atomic Number: 27, Atomic Mass: 60, Half-life: 5.3 s

photon = photons[1]
print(photoelectric_effect(photon))   # 1.333
electrons = pair_production(photon)   # two electrons, each 0.511 + 1.333 / 2 MeV
emitted = radiate(electrons[0], random.Random(0))
print(emitted.describe(), electrons[0].radiated_photons)
compton_effect(photon, math.pi / 3)   # lowers photon.energy in place and returns it
print(photon.describe())

print(StableNucleus(56.0, 26, "Fe").describe())
# Stable Nucleus: Fe, Atomic Number: 26, Atomic Mass: 56
```

### Particles

- `Photon(energy)` has zero rest mass. `Electron(rest_mass, energy)` keeps the
  photons it has radiated in `radiated_photons`, and `kinetic_energy()`
  returns `energy - rest_mass`.
- `copy()` returns a particle with the same mass and energy. The copy's
  electron or photon lists start empty.
- `radiate(electron, rng=None)` takes a fraction drawn uniformly from
  [0, 0.99) of the electron's kinetic energy. It lowers the electron's energy
  by that amount and returns a photon carrying it.
- `pair_production(photon)` returns two electrons. Each has the rest mass
  0.511 MeV and a total energy of 0.511 MeV plus half the photon's energy.

### Nuclei

- `Nucleus(atomic_mass, atomic_number, nucleus_type)` stores the absolute
  values of the mass and the number. Assigning a value that is not positive to
  `atomic_mass` issues a `RuntimeWarning` and stores its absolute value.
- `RadioactiveNucleus(..., half_life)` decays once. `decay()` returns the
  photons listed for its type in `DECAY_SPECTRA`:
  - Cs gives 0.661 MeV.
  - Na gives 1.2745 MeV and two 0.511 MeV photons from annihilation.
  - Co gives 1.173 MeV and 1.333 MeV.

  The first photon is also kept in `emitted_photons`. `decayed` tells whether
  the nucleus has decayed. `copy()` returns an independent copy, with copies of
  the emitted photons.
- A type with no known decay mode issues a `RuntimeWarning`, yields no
  photons, and is still marked as decayed.

### Errors

- `pair_production` raises `InsufficientEnergyError` if the photon has no more
  than 2 × 0.511 MeV.
- `radiate` raises `NoKineticEnergyError` if the electron has no kinetic
  energy.
- Both errors are subclasses of `ParticleError`.
- Calling `decay()` a second time raises `AlreadyDecayedError`.

### Running the scenario from code

`quantasim.cli.run_simulation(nuclei, out=None, rng=None)` runs the scenario
on nuclei you supply. It writes the report to `out` (standard output by
default) and returns the photons after scattering. `default_nuclei()` returns
the four nuclei the command uses.

## Limitations

- The half-life is stored and reported but plays no part in the simulation.
  Decay happens at once, when `decay()` is called, and no decay rates or decay
  times are computed.
- Only Na, Cs and Co have decay modes.
- The command always runs the built-in scenario. Its only option is `--seed`.