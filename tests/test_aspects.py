# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for aspects, orbs methods and stelliums."""
import pytest

from skychart.domain.aspects import (
    ASPECTS,
    CONJUNCTION,
    OPPOSITION,
    QUINCUNX,
    SQUARE,
    TRINE,
    AspectType,
    BodyLongitude,
    ClassicWithAspectRatio,
    Dariot,
    DeVore,
    iter_aspects,
    iter_stelliums,
    orbs_method,
)
from skychart.domain.ephemeris_contracts import ConfigurationError

POSITIONS = [
    BodyLongitude("Moon", 310.211118039121),
    BodyLongitude("Sun", 312.430798112358),
    BodyLongitude("Mercury", 297.078430402921),
    BodyLongitude("Venus", 295.209360003483),
    BodyLongitude("Mars", 177.966202541024),
    BodyLongitude("Jupiter", 46.9290328362618),
    BodyLongitude("Saturn", 334.601965217279),
    BodyLongitude("Uranus", 164.031950787664),
    BodyLongitude("Neptune", 229.922411342362),
    BodyLongitude("Pluto", 165.825418322174),
]
NAMES = [p.name for p in POSITIONS]


def _counts(method, flags):
    counts = []
    for source in POSITIONS:
        targets = [p for p in POSITIONS if p.name != source.name]
        counts.append(len(list(iter_aspects(source, targets, method, flags))))
    return counts


# ── Aspect counts ───────────────────────────────────────────────────

class TestAspectCounts:

    @pytest.mark.parametrize("method,expected", [
        (Dariot(), [2, 3, 2, 3, 2, 5, 0, 3, 5, 3]),
        (DeVore(), [1, 2, 2, 2, 2, 4, 0, 2, 1, 2]),
        (ClassicWithAspectRatio(), [2, 3, 2, 3, 2, 5, 0, 3, 5, 3]),
    ])
    def test_major(self, method, expected):
        assert _counts(method, AspectType.MAJOR) == expected

    @pytest.mark.parametrize("method,expected", [
        (Dariot(), [9, 9, 9, 9, 9, 9, 7, 8, 9, 8]),
        (DeVore(), [4, 4, 3, 2, 4, 5, 2, 4, 1, 3]),
        (ClassicWithAspectRatio(), [7, 9, 6, 7, 5, 9, 5, 7, 6, 5]),
    ])
    def test_all_types(self, method, expected):
        assert _counts(method, AspectType.ALL) == expected

    def test_ratio_narrows_minor_orbs(self):
        """Scaled orbs never find more aspects than plain Dariot."""
        for narrow, wide in zip(_counts(ClassicWithAspectRatio(), AspectType.ALL),
                                _counts(Dariot(), AspectType.ALL)):
            assert narrow <= wide


# ── Individual matches ──────────────────────────────────────────────

class TestIterAspects:

    def test_conjunction(self):
        """Moon and Sun are 2.2 degrees apart."""
        moon, sun = POSITIONS[0], POSITIONS[1]
        (match,) = iter_aspects(moon, [sun], Dariot())
        assert match.target == "Sun"
        assert match.aspect is CONJUNCTION
        assert match.arc == pytest.approx(2.21968, abs=1e-5)
        assert match.delta == pytest.approx(match.arc)

    def test_arc_across_zero(self):
        """350 and 10 degrees are 20 degrees apart, not 340."""
        a = BodyLongitude("Sun", 350.0)
        b = BodyLongitude("Moon", 10.0)
        matches = list(iter_aspects(a, [b], Dariot(), AspectType.ALL))
        assert matches[0].arc == pytest.approx(20.0)

    def test_closest_aspect_wins(self):
        """At 122 degrees with wide orbs, Trine beats Tridecile and Sesquiquadrate."""
        a = BodyLongitude("Sun", 0.0)
        b = BodyLongitude("Moon", 122.0)
        (match,) = iter_aspects(a, [b], Dariot(), AspectType.ALL)
        assert match.aspect is TRINE
        assert match.delta == pytest.approx(2.0)

    def test_type_filter(self):
        """Quincunx is minor: excluded by the MAJOR flag."""
        a = BodyLongitude("Sun", 0.0)
        b = BodyLongitude("Moon", 150.0)
        (match,) = iter_aspects(a, [b], Dariot(), AspectType.MINOR)
        assert match.aspect is QUINCUNX
        majors = list(iter_aspects(a, [b], Dariot(), AspectType.MAJOR))
        assert all(m.aspect is not QUINCUNX for m in majors)

    def test_no_aspect(self):
        """Narrow Pluto orbs leave 100 degrees unaspected."""
        a = BodyLongitude("Pluto", 0.0)
        b = BodyLongitude("Pluto", 100.0)
        assert list(iter_aspects(a, [b], Dariot(), AspectType.MAJOR)) == []

    def test_devore_asymmetric_conjunction(self):
        a = BodyLongitude("Sun", 0.0)
        b = BodyLongitude("Moon", 7.0)
        assert list(iter_aspects(a, [b], DeVore(), AspectType.MAJOR)) == []


# ── Orbs methods ────────────────────────────────────────────────────

class TestOrbsMethods:

    def test_dariot_orb(self):
        """Sun 15 and Moon 12 average to 13.5."""
        assert Dariot().orb("Sun", "Moon") == pytest.approx(13.5)

    def test_dariot_unknown_body_default_moiety(self):
        assert Dariot().orb("Node", "Node") == pytest.approx(Dariot.DEFAULT_MOIETY)

    def test_ratio_coefficients(self):
        method = ClassicWithAspectRatio()
        # orb 13.5 for Sun/Moon; minor * 0.6 = 8.1
        assert method.is_aspect("Sun", "Moon", QUINCUNX, 150.0 + 8.0)
        assert not method.is_aspect("Sun", "Moon", QUINCUNX, 150.0 + 8.2)

    def test_devore_square_range(self):
        assert DeVore().is_aspect("Sun", "Moon", SQUARE, 84.0)
        assert not DeVore().is_aspect("Sun", "Moon", SQUARE, 83.9)

    @pytest.mark.parametrize("name,cls", [
        ("Dariot", Dariot),
        ("DeVore", DeVore),
        ("ClassicWithAspectRatio", ClassicWithAspectRatio),
    ])
    def test_orbs_method_by_name(self, name, cls):
        assert isinstance(orbs_method(name), cls)

    def test_unknown_orbs_method(self):
        with pytest.raises(ConfigurationError, match="Ptolemy"):
            orbs_method("Ptolemy")


class TestAspectTable:

    def test_fifteen_aspects(self):
        assert len(ASPECTS) == 15
        assert ASPECTS[0] is CONJUNCTION
        assert ASPECTS[-1] is OPPOSITION

    def test_type_counts(self):
        kinds = [a.type_flag for a in ASPECTS]
        assert kinds.count(AspectType.MAJOR) == 5
        assert kinds.count(AspectType.MINOR) == 5
        assert kinds.count(AspectType.KEPLER) == 5

    def test_all_flag(self):
        assert AspectType.ALL == AspectType.MAJOR | AspectType.MINOR | AspectType.KEPLER


# ── Stelliums ───────────────────────────────────────────────────────

class TestStelliums:

    @pytest.mark.parametrize("gap,groups", [(10.0, 7), (15.0, 5), (0.0, 10)])
    def test_group_count(self, gap, groups):
        assert len(list(iter_stelliums(POSITIONS, gap))) == groups

    def test_default_gap(self):
        assert len(list(iter_stelliums(POSITIONS))) == 7

    def test_groups_are_sorted_and_complete(self):
        groups = list(iter_stelliums(POSITIONS))
        flat = [p for g in groups for p in g]
        assert sorted(p.name for p in flat) == sorted(NAMES)
        xs = [p.x for p in flat]
        assert xs == sorted(xs)

    def test_cluster_members(self):
        """With a 15 degree gap Venus, Mercury, Moon and Sun form one group."""
        groups = list(iter_stelliums(POSITIONS, 15.0))
        names = [{p.name for p in g} for g in groups]
        assert {"Venus", "Mercury", "Moon", "Sun"} in names

    def test_empty(self):
        assert list(iter_stelliums([])) == []
