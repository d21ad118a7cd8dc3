"""
Tests for group setup, fixed generators, seeded randomness and element encoding.
"""

import logging

import pytest
from charm.toolbox.pairinggroup import ZR, G1, pair

from bbs_plus import setup, get_generators, ScalarRng, encode_element, decode_element, InvalidEncoding
from bbs_plus.groups import scalar_order


@pytest.fixture(scope="module")
def pairing_params():
    """Initialize pairing group."""
    return setup('MNT224')


# ============================================================================
# Group setup
# ============================================================================

def test_setup_returns_fixed_generators(pairing_params):
    group = pairing_params['group']
    assert pairing_params['group_name'] == 'MNT224'

    g1, g2 = get_generators(group)
    assert g1 == pairing_params['g1']
    assert g2 == pairing_params['g2']


def test_pairing_is_bilinear(pairing_params):
    group = pairing_params['group']
    g1, g2 = pairing_params['g1'], pairing_params['g2']
    a = group.random(ZR)
    b = group.random(ZR)

    assert pair(g1 ** a, g2 ** b) == pair(g1, g2) ** (a * b)


def test_setup_falls_back_on_unknown_curve(caplog):
    with caplog.at_level(logging.WARNING, logger="bbs_plus.groups"):
        params = setup('NO_SUCH_CURVE')

    assert params['group_name'] == 'BN254'
    assert "falling back to BN254" in caplog.text


# ============================================================================
# ScalarRng
# ============================================================================

def test_same_seed_same_sequence(pairing_params):
    group = pairing_params['group']
    rng_a = ScalarRng(group, seed=bytes(32))
    rng_b = ScalarRng(group, seed=bytes(32))

    assert rng_a.draw_many(5) == rng_b.draw_many(5)


def test_different_seed_different_sequence(pairing_params):
    group = pairing_params['group']
    rng_a = ScalarRng(group, seed=bytes(32))
    rng_b = ScalarRng(group, seed=b"\x01" + bytes(31))

    assert rng_a.draw() != rng_b.draw()


def test_draws_are_distinct_and_counted(pairing_params):
    group = pairing_params['group']
    rng = ScalarRng(group, seed=bytes(32))

    scalars = rng.draw_many(4)
    assert rng.draws == 4
    assert len({int(s) for s in scalars}) == 4
    assert all(0 <= int(s) < scalar_order(group) for s in scalars)


def test_unseeded_rng_draws(pairing_params):
    rng = ScalarRng(pairing_params['group'])
    assert rng.draw() != rng.draw()


@pytest.mark.parametrize("seed", [b"", bytes(16), bytes(33), "0" * 32])
def test_rejects_bad_seed(pairing_params, seed):
    with pytest.raises(ValueError, match="32 bytes"):
        ScalarRng(pairing_params['group'], seed=seed)


# ============================================================================
# Element encoding
# ============================================================================

def test_encode_decode_g1(pairing_params):
    group = pairing_params['group']
    P = pairing_params['g1'] ** group.random(ZR)

    assert decode_element(encode_element(P, group), group) == P


def test_decode_garbage_raises(pairing_params):
    with pytest.raises(InvalidEncoding):
        decode_element(b"9:AAAA", pairing_params['group'])


def test_decode_non_bytes_raises(pairing_params):
    with pytest.raises(InvalidEncoding, match="expected bytes"):
        decode_element(12345, pairing_params['group'])
