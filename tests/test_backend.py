import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from fakes import MARKET_ANALYSIS  # noqa: E402
from langchain_core.exceptions import OutputParserException  # noqa: E402
from langchain_core.messages import AIMessage, HumanMessage  # noqa: E402

from kisan_advisor.core.backend import (  # noqa: E402
    GeminiBackend,
    GenerationResult,
    ToolCallRequest,
)
from kisan_advisor.core.errors import BackendError, SchemaMismatchError  # noqa: E402
from kisan_advisor.models.market_analysis import MarketAnalysisOutput  # noqa: E402
from kisan_advisor.tools.farming_tips import build_farming_tip_tool  # noqa: E402

MESSAGES = [HumanMessage(content="Analyze the wheat market in Punjab.")]


class StubRunnable:
    def __init__(self, outcome):
        self.outcome = outcome
        self.received = []

    async def ainvoke(self, messages):
        self.received.append(messages)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class StubChatModel(StubRunnable):
    """Stands in for ChatGoogleGenerativeAI, returning one scripted outcome."""

    def __init__(self, outcome):
        super().__init__(outcome)
        self.structured_calls = []
        self.bound_tools = None

    def with_structured_output(self, schema, method=None):
        self.structured_calls.append((schema, method))
        return StubRunnable(self.outcome)

    def bind_tools(self, tools):
        self.bound_tools = tools
        return self


def backend_for(outcome):
    model = StubChatModel(outcome)
    return GeminiBackend(model_factory=lambda: model), model


class StructuredOutputTests(unittest.IsolatedAsyncioTestCase):
    async def test_pydantic_output_becomes_data(self) -> None:
        backend, model = backend_for(MarketAnalysisOutput.model_validate(MARKET_ANALYSIS))
        result = await backend.generate(MESSAGES, output_schema=MarketAnalysisOutput)

        self.assertEqual(result.data, MARKET_ANALYSIS)
        self.assertEqual(model.structured_calls, [(MarketAnalysisOutput, "json_schema")])

    async def test_dict_output_becomes_data(self) -> None:
        backend, _ = backend_for(dict(MARKET_ANALYSIS))
        result = await backend.generate(MESSAGES, output_schema=MarketAnalysisOutput)
        self.assertEqual(result.data, MARKET_ANALYSIS)

    async def test_none_output_is_empty_result(self) -> None:
        backend, _ = backend_for(None)
        result = await backend.generate(MESSAGES, output_schema=MarketAnalysisOutput)
        self.assertEqual(result, GenerationResult())

    async def test_parser_failure_is_schema_mismatch(self) -> None:
        backend, _ = backend_for(OutputParserException("Invalid json output"))
        with self.assertLogs("kisan_advisor.core.backend", level="WARNING"):
            with self.assertRaises(SchemaMismatchError) as ctx:
                await backend.generate(MESSAGES, output_schema=MarketAnalysisOutput)
        self.assertEqual(ctx.exception.schema_name, "MarketAnalysisOutput")

    async def test_transport_failure_is_backend_error(self) -> None:
        backend, _ = backend_for(ConnectionError("connection reset by peer"))
        with self.assertLogs("kisan_advisor.core.backend", level="ERROR"):
            with self.assertRaises(BackendError) as ctx:
                await backend.generate(MESSAGES, output_schema=MarketAnalysisOutput)
        self.assertIn("connection reset by peer", ctx.exception.message)
        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)


class ToolCallingTests(unittest.IsolatedAsyncioTestCase):
    async def test_tool_calls_are_extracted(self) -> None:
        message = AIMessage(
            content="",
            tool_calls=[{"name": "get_farming_tip", "args": {}, "id": "call-9"}],
            additional_kwargs={"thought_signature": "sig-1"},
        )
        backend, model = backend_for(message)
        result = await backend.generate(MESSAGES, tools=[build_farming_tip_tool()])

        self.assertEqual(
            result.tool_calls, [ToolCallRequest(id="call-9", name="get_farming_tip", args={})]
        )
        self.assertIs(result.message, message)
        self.assertEqual([tool.name for tool in model.bound_tools], ["get_farming_tip"])

    async def test_text_blocks_are_joined(self) -> None:
        backend, model = backend_for(
            AIMessage(content=[{"type": "text", "text": "Namaste!"}, "Rotate crops."])
        )
        result = await backend.generate(MESSAGES)

        self.assertEqual(result.text, "Namaste!\nRotate crops.")
        self.assertEqual(result.tool_calls, [])
        self.assertIsNone(model.bound_tools)

    async def test_transport_failure_while_chatting(self) -> None:
        backend, _ = backend_for(TimeoutError("deadline exceeded"))
        with self.assertLogs("kisan_advisor.core.backend", level="ERROR"):
            with self.assertRaises(BackendError):
                await backend.generate(MESSAGES, tools=[build_farming_tip_tool()])


if __name__ == "__main__":
    unittest.main()
