# Copyright (c) 2026 ChromaVoid
# SPDX-License-Identifier: MIT

"""Tests for the seeded number stream."""

from chromavoid.engine.rng import create_rng, seed_hash


class TestSeedHash:
    def test_empty_seed(self):
        assert seed_hash("") == 0

    def test_small_seeds(self):
        assert seed_hash("a") == 97
        assert seed_hash("ab") == 3105

    def test_stays_in_int32(self):
        h = seed_hash("a fairly long seed string that overflows 32 bits " * 4)
        assert -(2 ** 31) <= h < 2 ** 31

    def test_astral_characters_use_surrogate_pairs(self):
        # U+1F311 is two UTF-16 code units
        assert seed_hash("\U0001F311") == (0xD83C * 31 + 0xDF11)


class TestCreateRng:
    def test_known_sequence(self):
        rng = create_rng("a")
        assert rng() == 4682287 / 2 ** 32
        assert rng() == 2680376385 / 2 ** 32

    def test_deterministic(self):
        a = create_rng("singularity")
        b = create_rng("singularity")
        assert [a() for _ in range(50)] == [b() for _ in range(50)]

    def test_different_seeds_differ(self):
        a = create_rng("alpha")
        b = create_rng("beta")
        assert [a() for _ in range(5)] != [b() for _ in range(5)]

    def test_range(self):
        rng = create_rng("range-check")
        values = [rng() for _ in range(2000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_empty_seed_is_constant_zero(self):
        rng = create_rng("")
        assert [rng() for _ in range(5)] == [0.0] * 5

    def test_independent_streams(self):
        a = create_rng("x")
        a()
        b = create_rng("x")
        assert b() == create_rng("x")()
