import pytest

from quantasim.nuclei import (
    AlreadyDecayedError,
    Nucleus,
    RadioactiveNucleus,
    StableNucleus,
)


def test_constructor_takes_absolute_values():
    nucleus = Nucleus(-56.0, -26, "Fe")
    assert nucleus.atomic_mass == 56.0
    assert nucleus.atomic_number == 26
    assert nucleus.nucleus_type == "Fe"


def test_setting_positive_mass_keeps_value():
    nucleus = Nucleus(1.0, 1, "H")
    nucleus.atomic_mass = 2.5
    assert nucleus.atomic_mass == 2.5


def test_setting_negative_mass_warns_and_takes_absolute():
    nucleus = Nucleus(1.0, 1, "H")
    with pytest.warns(RuntimeWarning):
        nucleus.atomic_mass = -3.0
    assert nucleus.atomic_mass == 3.0


def test_setting_zero_mass_warns():
    nucleus = Nucleus(1.0, 1, "H")
    with pytest.warns(RuntimeWarning):
        nucleus.atomic_mass = 0.0
    assert nucleus.atomic_mass == 0.0


def test_nucleus_describe():
    assert Nucleus(56.0, 26, "Fe").describe() == (
        "Nucleus: Fe, Atomic Number: 26, Atomic Mass: 56"
    )


def test_stable_nucleus_describe_prefix():
    stable = StableNucleus(56.0, 26, "Fe")
    assert stable.describe() == "Stable Nucleus: Fe, Atomic Number: 26, Atomic Mass: 56"


def test_radioactive_describe_includes_half_life():
    nucleus = RadioactiveNucleus(22.0, 11, "Na", 2.6)
    assert nucleus.describe() == (
        "Radioactive Nucleus: Na, Atomic Number: 11, Atomic Mass: 22, Half-life: 2.6 s"
    )


@pytest.mark.parametrize(
    "kind, energies",
    [
        ("Cs", [0.661]),
        ("Na", [1.2745, 0.511, 0.511]),
        ("Co", [1.173, 1.333]),
    ],
)
def test_decay_spectra(kind, energies):
    nucleus = RadioactiveNucleus(1.0, 1, kind, 1.0)
    photons = nucleus.decay()
    assert [photon.energy for photon in photons] == energies
    assert all(photon.rest_mass == 0.0 for photon in photons)
    assert nucleus.decayed is True


def test_decay_records_copy_of_first_photon():
    nucleus = RadioactiveNucleus(60.0, 27, "Co", 5.3)
    photons = nucleus.decay()
    assert len(nucleus.emitted_photons) == 1
    assert nucleus.emitted_photons[0].energy == photons[0].energy
    assert nucleus.emitted_photons[0] is not photons[0]


def test_fresh_nucleus_has_not_decayed():
    nucleus = RadioactiveNucleus(137.0, 55, "Cs", 30.0)
    assert nucleus.decayed is False
    assert nucleus.emitted_photons == []


def test_decay_twice_raises():
    nucleus = RadioactiveNucleus(137.0, 55, "Cs", 30.0)
    nucleus.decay()
    with pytest.raises(AlreadyDecayedError):
        nucleus.decay()


def test_unknown_decay_mode_warns_and_marks_decayed():
    nucleus = RadioactiveNucleus(238.0, 92, "U", 1.0)
    with pytest.warns(RuntimeWarning):
        photons = nucleus.decay()
    assert photons == []
    assert nucleus.decayed is True
    assert nucleus.emitted_photons == []


def test_copy_is_deep():
    nucleus = RadioactiveNucleus(22.0, 11, "Na", 2.6)
    nucleus.decay()
    twin = nucleus.copy()
    assert twin.decayed is True
    assert twin.half_life == 2.6
    assert twin.nucleus_type == "Na"
    assert len(twin.emitted_photons) == 1
    assert twin.emitted_photons[0] is not nucleus.emitted_photons[0]
    twin.emitted_photons[0].energy = 0.0
    assert nucleus.emitted_photons[0].energy == 1.2745


def test_copy_of_decayed_nucleus_cannot_decay():
    nucleus = RadioactiveNucleus(60.0, 27, "Co", 5.3)
    nucleus.decay()
    with pytest.raises(AlreadyDecayedError):
        nucleus.copy().decay()


def test_half_life_is_settable():
    nucleus = RadioactiveNucleus(60.0, 27, "Co", 5.3)
    nucleus.half_life = 10.0
    assert nucleus.describe().endswith("Half-life: 10 s")