MALFORMED_RESPONSE = 'Malformed beacon node response'
NO_AVAILABLE_NODES = 'No available beacon nodes'
NO_VALIDATOR_DATA = 'No validator data'


class MalformedResponseError(ValueError):
    def __init__(self, response: object):
        super().__init__(MALFORMED_RESPONSE)
        self.response = response


class ValidatorCheckError(Exception):
    pass


class NoAvailableNodesError(ValidatorCheckError):
    def __init__(self) -> None:
        super().__init__(NO_AVAILABLE_NODES)


class NoValidatorDataError(ValidatorCheckError):
    def __init__(self) -> None:
        super().__init__(NO_VALIDATOR_DATA)
