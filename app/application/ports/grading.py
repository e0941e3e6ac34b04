from abc import ABC, abstractmethod


class GradingPort(ABC):
    @abstractmethod
    async def grade(self, system_prompt: str, task_prompt: str) -> str:
        """
        Send one grading request and return the raw model text.

        Requirements:
        - Exactly one outbound call; no retries
        - Return "" when the service answers without any candidate text
        - Must be stateless and safe to reuse across calls

        Args:
            system_prompt: Fixed grader instruction
            task_prompt: Prompt embedding question, answers and rubric

        Returns:
            Raw text produced by the model (may include code fences or prose)

        Raises:
            TransportError: network failure, timeout, non-2xx status or malformed envelope
        """
        raise NotImplementedError
