import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from fakes import FORECAST, MARKET_ANALYSIS, make_client  # noqa: E402
from langchain_core.messages import AIMessage, ToolMessage  # noqa: E402

from kisan_advisor.core.backend import GenerationResult, ToolCallRequest  # noqa: E402
from kisan_advisor.core.errors import (  # noqa: E402
    NoResponseError,
    ToolLoopExceededError,
    ValidationError,
)
from kisan_advisor.core.tool_descriptor import ToolDescriptor  # noqa: E402
from kisan_advisor.models.krishi_assistant import FarmingTipInput  # noqa: E402
from kisan_advisor.models.weather import WeatherForecastOutput  # noqa: E402
from kisan_advisor.services.krishi_assistant_service import krishi_assistant  # noqa: E402
from kisan_advisor.tools.farming_tips import FARMING_TIPS, build_farming_tip_tool  # noqa: E402


def tool_call(name, args=None, call_id="call-1"):
    return GenerationResult(
        tool_calls=[ToolCallRequest(id=call_id, name=name, args=args or {})]
    )


def tool_messages(call):
    return [m for m in call["messages"] if isinstance(m, ToolMessage)]


class KrishiAssistantTests(unittest.IsolatedAsyncioTestCase):
    async def test_weather_tool_runs_once_and_feeds_the_answer(self) -> None:
        client, backend = make_client(
            tool_call("get_current_weather", {"latitude": 11.0, "longitude": 77.0}),
            FORECAST,
            GenerationResult(text="It is sunny in Coimbatore today."),
        )
        result = await krishi_assistant(
            {"query": "What is the weather in Coimbatore?"}, client=client
        )

        self.assertEqual(result.response, "It is sunny in Coimbatore today.")
        forecast_calls = [
            c for c in backend.calls if c["output_schema"] is WeatherForecastOutput
        ]
        self.assertEqual(len(forecast_calls), 1)
        [message] = tool_messages(backend.calls[-1])
        self.assertEqual(
            message.content,
            "The weather in Coimbatore, Tamil Nadu, India is currently sunny "
            "with a high of 32°C.",
        )
        self.assertEqual(message.tool_call_id, "call-1")

    async def test_market_tool_summary(self) -> None:
        client, backend = make_client(
            tool_call("get_market_analysis", {"crop_type": "Wheat", "region": "Punjab"}),
            MARKET_ANALYSIS,
            GenerationResult(text="Hold your wheat for now."),
        )
        await krishi_assistant({"query": "Should I sell my wheat?"}, client=client)

        [message] = tool_messages(backend.calls[-1])
        self.assertIn("The current average price for Wheat is ₹2150", message.content)
        self.assertIn("the trend is up", message.content)

    async def test_direct_answer_skips_tools(self) -> None:
        client, backend = make_client(GenerationResult(text="Namaste!"))
        result = await krishi_assistant({"query": "Hello"}, client=client)
        self.assertEqual(result.response, "Namaste!")
        self.assertEqual(len(backend.calls), 1)
        self.assertEqual(
            [tool.name for tool in backend.calls[0]["tools"]],
            ["get_current_weather", "get_market_analysis", "get_farming_tip"],
        )

    async def test_tool_failure_is_reported_to_the_model(self) -> None:
        async def broken_tip() -> str:
            raise RuntimeError("tips service down")

        tools = [
            ToolDescriptor(
                name="get_farming_tip",
                description="Provides a farming tip.",
                input_model=FarmingTipInput,
                func=broken_tip,
            )
        ]
        client, backend = make_client(
            tool_call("get_farming_tip"),
            GenerationResult(text="Rotate your crops every season."),
        )
        result = await krishi_assistant(
            {"query": "Give me a tip"}, client=client, tools=tools
        )

        self.assertEqual(result.response, "Rotate your crops every season.")
        [message] = tool_messages(backend.calls[-1])
        self.assertIn("tips service down", message.content)
        self.assertIn("Answer without this information.", message.content)

    async def test_unknown_tool_is_reported_to_the_model(self) -> None:
        client, backend = make_client(
            tool_call("get_soil_report"),
            GenerationResult(text="I cannot check soil reports."),
        )
        await krishi_assistant({"query": "How is my soil?"}, client=client)
        [message] = tool_messages(backend.calls[-1])
        self.assertEqual(message.content, "Tool 'get_soil_report' is not available.")

    async def test_tool_loop_is_bounded(self) -> None:
        client, backend = make_client(
            tool_call("get_farming_tip", call_id="a"),
            tool_call("get_farming_tip", call_id="b"),
            tool_call("get_farming_tip", call_id="c"),
        )
        with self.assertRaises(ToolLoopExceededError):
            await krishi_assistant(
                {"query": "Tips please"}, client=client, max_iterations=2
            )
        self.assertEqual(len(backend.calls), 3)

    async def test_provider_message_is_kept_in_history(self) -> None:
        provider_message = AIMessage(
            content="",
            tool_calls=[{"name": "get_farming_tip", "args": {}, "id": "call-1"}],
            additional_kwargs={"thought_signature": "sig-1"},
        )
        client, backend = make_client(
            GenerationResult(
                tool_calls=[ToolCallRequest(id="call-1", name="get_farming_tip")],
                message=provider_message,
            ),
            GenerationResult(text="Mulch your beds before summer."),
        )
        await krishi_assistant({"query": "Give me a tip"}, client=client)

        ai_messages = [
            m for m in backend.calls[-1]["messages"] if isinstance(m, AIMessage)
        ]
        self.assertEqual(len(ai_messages), 1)
        self.assertIs(ai_messages[0], provider_message)
        self.assertEqual(ai_messages[0].additional_kwargs["thought_signature"], "sig-1")

    async def test_blank_answer_is_no_response(self) -> None:
        client, _ = make_client(GenerationResult(text="  "))
        with self.assertRaises(NoResponseError):
            await krishi_assistant({"query": "Hello"}, client=client)

    async def test_blank_query_is_rejected(self) -> None:
        client, backend = make_client()
        with self.assertRaises(ValidationError):
            await krishi_assistant({"query": "   "}, client=client)
        self.assertEqual(backend.calls, [])


class FarmingTipToolTests(unittest.IsolatedAsyncioTestCase):
    async def test_returns_one_of_the_known_tips(self) -> None:
        tool = build_farming_tip_tool(rng=random.Random(7))
        tip = await tool.execute({})
        self.assertIn(tip, FARMING_TIPS)


if __name__ == "__main__":
    unittest.main()
