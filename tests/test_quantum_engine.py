"""Tests for the simulated quantum randomness source."""

from __future__ import annotations

import pytest

from passforge.config import LOWERCASE, QuantumSourceConfig
from passforge.mapping import generate
from passforge.quantum_engine import QuantumEngine, QuantumRandomSource


def test_engine_returns_one_bit_per_qubit() -> None:
    engine = QuantumEngine(QuantumSourceConfig(num_qubits=6))
    bits = engine.get_raw_bits(seed=1)

    assert len(bits) == 6
    assert set(bits) <= {0, 1}
    assert engine.last_circuit is not None


def test_engine_seed_is_reproducible() -> None:
    engine = QuantumEngine(QuantumSourceConfig(num_qubits=12))

    assert engine.get_raw_bits(seed=42) == engine.get_raw_bits(seed=42)


@pytest.mark.parametrize("num_qubits", [0, 10_000])
def test_engine_rejects_bad_qubit_count(num_qubits: int) -> None:
    with pytest.raises(ValueError):
        QuantumEngine(QuantumSourceConfig(num_qubits=num_qubits))


def test_source_draws_stay_in_range() -> None:
    source = QuantumRandomSource(QuantumSourceConfig(num_qubits=8, seed=3))
    draws = [source.randbelow(60) for _ in range(50)]

    assert all(0 <= d < 60 for d in draws)
    assert source.refills >= 1


def test_source_seed_is_reproducible() -> None:
    config = QuantumSourceConfig(num_qubits=8, seed=9)

    first = generate(12, source=QuantumRandomSource(config))
    second = generate(12, source=QuantumRandomSource(config))

    assert first == second
    assert len(first) == 12
    assert set(first) <= set(LOWERCASE)


def test_source_without_amplification_uses_raw_bits() -> None:
    config = QuantumSourceConfig(num_qubits=4, entropy_rounds=0, quantum_streams=1, seed=0)
    source = QuantumRandomSource(config)

    assert len(source._refill()) == 4
