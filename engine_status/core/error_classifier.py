"""Classification of engine probe failures."""

from engine_status.models.status import ProbeError, ProbeOutcome

# CODE 12 for gRPC is equal to 'unimplemented'
# https://github.com/grpc/grpc-go/blob/master/codes/codes.go
UNIMPLEMENTED_SERVICE_CODE = 12

# Returned with a generic code (2) for both locked and unlocked wallets, so
# it can only be matched on the message text.
WALLET_EXISTS_ERROR_MESSAGE = "wallet already exists"


class ErrorClassifier:
    """Maps a ProbeError onto the failure outcomes the classifier understands."""
    
    def __init__(self, unimplemented_code: int = UNIMPLEMENTED_SERVICE_CODE,
                 wallet_exists_message: str = WALLET_EXISTS_ERROR_MESSAGE):
        self.unimplemented_code = unimplemented_code
        self.wallet_exists_message = wallet_exists_message
    
    def classify(self, error: ProbeError) -> ProbeOutcome:
        """
        Classify a probe failure.
        
        The code check wins over the message check. Matching on the
        message is case-sensitive.
        """
        if error.code == self.unimplemented_code:
            return ProbeOutcome.NOT_IMPLEMENTED
        
        if error.message and self.wallet_exists_message in error.message:
            return ProbeOutcome.WALLET_EXISTS
        
        return ProbeOutcome.OTHER
    
    def __repr__(self) -> str:
        return (f"ErrorClassifier(unimplemented_code={self.unimplemented_code!r}, "
                f"wallet_exists_message={self.wallet_exists_message!r})")


_default_classifier = ErrorClassifier()


def classify_error(error: ProbeError) -> ProbeOutcome:
    """Classify using the standard gRPC code and wallet message."""
    return _default_classifier.classify(error)
