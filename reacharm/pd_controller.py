"""Per-joint PD velocity controller."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence

from reacharm.ports import JointEncoderReading, JointId, JointVelocityCommand


class EncoderReader(Protocol):
    def latest(self) -> Optional[JointEncoderReading]: ...


class VelocitySender(Protocol):
    def send(self, command: JointVelocityCommand) -> None: ...


class PdJointController:
    """Drives each joint toward its target angle by emitting velocity commands.

    Joint ``i`` reads from ``encoder_rxs[i]`` and writes to ``velocity_txs[i]``.
    """

    def __init__(
        self,
        target_q: Sequence[float],
        encoder_rxs: Sequence[EncoderReader],
        velocity_txs: Sequence[VelocitySender],
    ) -> None:
        n = len(encoder_rxs)
        if len(target_q) < n or len(velocity_txs) < n:
            raise ValueError(
                f"{n} encoders need as many targets and velocity ports; "
                f"got {len(target_q)} targets and {len(velocity_txs)} ports"
            )
        self.target_q: List[float] = list(target_q)
        self.kp = 4.0
        self.kd = 1.5
        self.encoder_rxs = list(encoder_rxs)
        self.velocity_txs = list(velocity_txs)

    def step(self, t: Any) -> None:
        """Send one command per joint that has an encoder reading available."""
        for i, (rx, target, tx) in enumerate(
            zip(self.encoder_rxs, self.target_q, self.velocity_txs)
        ):
            reading = rx.latest()
            if reading is None:
                continue
            err = target - reading.q
            tx.send(
                JointVelocityCommand(
                    joint=JointId(i),
                    q_dot_target=self.kp * err - self.kd * reading.q_dot,
                )
            )