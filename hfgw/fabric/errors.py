class GatewayError(Exception):
    pass


class ConfigurationError(GatewayError):
    """Identity, signer or connection is missing or unusable."""


class EncodingError(GatewayError):
    """Key or certificate material could not be parsed."""


class PhaseError(GatewayError):
    """The operation does not apply to the current transaction phase."""


class GatewayRPCError(GatewayError):
    """A gateway call failed.

    Args:
        code (grpc.StatusCode): status code of the failed call
        details (str): status message sent by the gateway
        error_details (list): gateway_pb2.ErrorDetail records, one per
            endorsing peer or orderer that reported the failure
    """

    def __init__(self, code, details, error_details=None):
        self.code = code
        self.details = details
        self.error_details = list(error_details or [])
        super(GatewayRPCError, self).__init__(str(self))

    def __str__(self):
        name = getattr(self.code, 'name', self.code)
        lines = [f'[{name}] {self.details}']
        for detail in self.error_details:
            lines.append(f'  - {detail.address} ({detail.msp_id}): {detail.message}')
        return '\n'.join(lines)
