"""Engine lifecycle status classification.

The engine never reports its lifecycle state directly. It is inferred from
three probes run in sequence:

- info: the Lightning RPC. Answers only once the wallet is unlocked.
- seed: the WalletUnlocker RPC. Answers only while no wallet exists, and
  fails with a generic "wallet already exists" error afterwards.
- availability: the Lightning RPC again, used to tell a locked wallet from
  one that was unlocked after the info probe ran.

Each probe outcome selects either the next probe or a terminal status
through ``TRANSITIONS``.
"""

from enum import Enum
from typing import Dict, Tuple, Union

from engine_status.core.version import at_least
from engine_status.models.status import (
    EngineContext,
    EngineStatus,
    InfoResult,
    ProbeError,
    ProbeOutcome,
)


class Step(Enum):
    """Probe steps of the classification procedure."""
    INFO = "info"
    SEED = "seed"
    AVAILABILITY = "availability"


Transition = Union[Step, EngineStatus]

# A successful info probe is resolved by _status_from_info instead.
TRANSITIONS: Dict[Tuple[Step, ProbeOutcome], Transition] = {
    (Step.INFO, ProbeOutcome.NOT_IMPLEMENTED): Step.SEED,
    (Step.INFO, ProbeOutcome.WALLET_EXISTS): EngineStatus.UNAVAILABLE,
    (Step.INFO, ProbeOutcome.OTHER): EngineStatus.UNAVAILABLE,

    # Wallet unlocker accepted the call: no wallet has been created yet
    (Step.SEED, ProbeOutcome.SUCCESS): EngineStatus.NEEDS_WALLET,
    (Step.SEED, ProbeOutcome.WALLET_EXISTS): Step.AVAILABILITY,
    (Step.SEED, ProbeOutcome.NOT_IMPLEMENTED): EngineStatus.UNAVAILABLE,
    (Step.SEED, ProbeOutcome.OTHER): EngineStatus.UNAVAILABLE,

    # Wallet exists but the Lightning RPC is still down: locked
    (Step.AVAILABILITY, ProbeOutcome.NOT_IMPLEMENTED): EngineStatus.LOCKED,
    # Lightning RPC came up after the info probe: unlocked out of band
    (Step.AVAILABILITY, ProbeOutcome.SUCCESS): EngineStatus.UNLOCKED,
    (Step.AVAILABILITY, ProbeOutcome.WALLET_EXISTS): EngineStatus.UNLOCKED,
    (Step.AVAILABILITY, ProbeOutcome.OTHER): EngineStatus.UNLOCKED,
}


def _status_from_info(ctx: EngineContext, info: InfoResult) -> EngineStatus:
    """Resolve a successful info probe into a terminal status."""
    if not isinstance(info, InfoResult):
        raise TypeError(f"Info probe must return InfoResult, got {type(info).__name__}")

    chains = info.chains
    if len(chains) != 1 or chains[0].chain != ctx.chain_name:
        # Reachable and unlocked, but not yet reporting the expected chain
        return EngineStatus.UNLOCKED

    if not at_least(info.version, ctx.min_version):
        return EngineStatus.OLD_VERSION

    if not info.synced_to_chain:
        return EngineStatus.NOT_SYNCED

    return EngineStatus.VALIDATED


def _run_step(ctx: EngineContext, step: Step) -> Transition:
    """Call the probe for a step and look up where its outcome leads."""
    try:
        if step is Step.INFO:
            return _status_from_info(ctx, ctx.info_probe(ctx))
        if step is Step.SEED:
            ctx.seed_probe(ctx)
        else:
            ctx.availability_probe(ctx)
        outcome = ProbeOutcome.SUCCESS
    except ProbeError as e:
        outcome = ctx.error_classifier.classify(e)

    return TRANSITIONS[(step, outcome)]


def classify(ctx: EngineContext) -> EngineStatus:
    """
    Determine the current lifecycle status of an engine.

    Probes run strictly in sequence and each at most once. Only ProbeError
    failures are turned into a status; anything else raised by a probe or
    by a malformed info result propagates to the caller.

    Args:
        ctx: Engine context with the expected chain, minimum version and probes

    Returns:
        Exactly one EngineStatus
    """
    transition: Transition = Step.INFO

    while isinstance(transition, Step):
        transition = _run_step(ctx, transition)

    return transition
