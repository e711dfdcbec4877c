from cultural_planner.clients.protocols import CompletionClientProtocol

__all__ = ["CompletionClientProtocol"]
