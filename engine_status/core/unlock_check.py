"""Rough check of whether an engine's wallet is unlocked."""

from engine_status.models.status import EngineContext, ProbeError, ProbeOutcome


def is_engine_unlocked(ctx: EngineContext) -> bool:
    """
    Rough estimate of whether the engine's wallet is unlocked.
    
    States of the engine:
    - Locked: first-time use, or a password is needed to access funds
    - Unlocked: the engine is functional and ready to accept requests
    
    Raises:
        ProbeError: if the seed probe fails in an unrecognized way
    """
    try:
        # The wallet unlocker answers while the engine is locked or has no
        # wallet yet. It can also still be answering right after an unlock.
        ctx.seed_probe(ctx)
    except ProbeError as e:
        outcome = ctx.error_classifier.classify(e)
        
        # Wallet unlocker was never started, so the Lightning RPC is serving.
        # Happens when the engine runs without a seed backup (development).
        if outcome is ProbeOutcome.NOT_IMPLEMENTED:
            return True
        
        # Returned for both locked and unlocked wallets. A Lightning RPC that
        # is still unimplemented means the wallet is locked.
        if outcome is ProbeOutcome.WALLET_EXISTS:
            try:
                ctx.availability_probe(ctx)
            except ProbeError as availability_error:
                if ctx.error_classifier.classify(availability_error) is ProbeOutcome.NOT_IMPLEMENTED:
                    return False
            
            return True
        
        # Needs troubleshooting by the caller
        raise
    
    return False
