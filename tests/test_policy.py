import pytest

from hostmat.policy import MM, Norm, Trans


def _names_by_lookup(policy):
    return [policy(member.value).name for member in policy]


def test_mm_members():
    assert _names_by_lookup(MM) == ["BASE", "TILED"]


def test_trans_members():
    assert _names_by_lookup(Trans) == ["BASE", "TILED"]


def test_norm_has_only_base():
    assert _names_by_lookup(Norm) == ["BASE"]


@pytest.mark.parametrize("policy", [MM, Trans, Norm])
def test_lookup_by_value_round_trips(policy):
    for member in policy:
        assert policy(member.value) is member


def test_policies_are_distinct_kinds():
    mm_base = MM(MM.BASE.value)
    trans_base = Trans(Trans.BASE.value)
    norm_base = Norm(Norm.BASE.value)
    assert mm_base != trans_base
    assert trans_base != norm_base
    assert mm_base != MM(MM.TILED.value)


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Norm("tiled")