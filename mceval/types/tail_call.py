from mceval.types.procedure import Procedure
from mceval.types.environment import Environment


class TailCall:
    """A pending procedure body evaluation, stepped by the trampoline."""

    __slots__ = ("procedure", "env")

    def __init__(self, procedure: Procedure, env: Environment):
        self.procedure = procedure
        self.env = env
