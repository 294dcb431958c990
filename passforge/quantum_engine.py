from __future__ import annotations

"""
Quantum engine: builds a circuit, puts qubits in superposition, measures
them and hands the raw bits to a randomness source.
"""
import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import BitstreamSource, amplify_entropy

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        # Local simulator backend.
        self.backend = AerSimulator()
        self.last_circuit: QuantumCircuit | None = None

        if self.config.num_qubits < 1:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} must be at least 1."
            )

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits, put each one into superposition with an H gate and
        measure it in the computational basis.
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)
        qc.measure(range(n), range(n))

        return qc

    def get_raw_bits(self, seed: int | None = None) -> List[int]:
        """
        Run the circuit once (a single shot) and return one bit per qubit.
        """
        qc = self._build_circuit()
        tqc = transpile(qc, self.backend)

        run_options = {"shots": 1}
        if seed is not None:
            run_options["seed_simulator"] = seed
        result = self.backend.run(tqc, **run_options).result()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(result.get_counts().keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bitstring = bitstring[::-1]

        self.last_circuit = qc
        return [int(b) for b in bitstring]


class QuantumRandomSource(BitstreamSource):
    """
    Randomness source fed by simulated qubit measurements.

    Every refill samples `quantum_streams` independent engine runs,
    XOR-combines them and mixes the result with SHA-256.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        super().__init__()
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.engine = QuantumEngine(self.config)
        self.refills = 0

    def _stream_seed(self, stream: int) -> int | None:
        if self.config.seed is None:
            return None
        streams = max(1, self.config.quantum_streams)
        return self.config.seed + self.refills * streams + stream

    def _refill(self) -> List[int]:
        combined: List[int] | None = None

        for stream in range(max(1, self.config.quantum_streams)):
            bits = self.engine.get_raw_bits(seed=self._stream_seed(stream))
            if combined is None:
                combined = bits
            else:
                combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None
        self.refills += 1
        logger.debug(
            "Quantum refill #%s: %s raw bits from %s stream(s)",
            self.refills,
            len(combined),
            max(1, self.config.quantum_streams),
        )
        return amplify_entropy(combined, self.config.entropy_rounds)
