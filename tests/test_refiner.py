"""
Tests for refinement/refiner.py - best-effort AI refinement.
"""
import pytest
from unittest.mock import AsyncMock


class TestRefiner:
    """Tests for Refiner.refine."""

    @pytest.mark.asyncio
    async def test_returns_refined_text(self, mock_gemini):
        from refinement.refiner import Refiner

        mock_gemini.generate.return_value = "  Hola, ¿cómo está?\n"
        refiner = Refiner("gemini", mock_gemini)

        result = await refiner.refine("hola como esta", "Spanish")

        assert result.refined is True
        assert result.refined_text == "Hola, ¿cómo está?"
        prompt = mock_gemini.generate.call_args.args[0]
        assert 'Original message in Spanish: "hola como esta"' in prompt

    @pytest.mark.asyncio
    async def test_no_credential_skips_call(self, mock_gemini):
        from refinement.refiner import Refiner

        mock_gemini.enabled = False
        refiner = Refiner("gemini", mock_gemini)

        result = await refiner.refine("hola", "Spanish")

        assert result.refined_text == "hola"
        assert result.refined is False
        assert result.reason == "no_credential"
        mock_gemini.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_client_skips_call(self):
        from refinement.refiner import Refiner

        result = await Refiner("gemini", None).refine("hola", "Spanish")

        assert result.refined_text == "hola"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider", ["none", "openai"])
    async def test_other_providers_return_original(self, mock_gemini, provider):
        from refinement.refiner import Refiner

        result = await Refiner(provider, mock_gemini).refine("hola", "Spanish")

        assert result.refined_text == "hola"
        assert result.reason == "provider_disabled"
        mock_gemini.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_original(self, mock_gemini):
        from core.exceptions import RefinementFailure
        from refinement.refiner import Refiner

        mock_gemini.generate.side_effect = RefinementFailure("gemini", "timed out after 10s")

        result = await Refiner("gemini", mock_gemini).refine("hola", "Spanish")

        assert result.refined_text == "hola"
        assert result.refined is False
        assert "timed out" in result.reason

    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer", [None, "", "   "])
    async def test_empty_answer_falls_back_to_original(self, mock_gemini, answer):
        from refinement.refiner import Refiner

        mock_gemini.generate.return_value = answer

        result = await Refiner("gemini", mock_gemini).refine("hola", "Spanish")

        assert result.refined_text == "hola"
        assert result.reason == "empty_response"

    @pytest.mark.asyncio
    async def test_close_closes_client(self, mock_gemini):
        from refinement.refiner import Refiner

        await Refiner("gemini", mock_gemini).close()

        mock_gemini.close.assert_awaited_once()


class TestRefinementPrompt:
    """Tests for get_refinement_prompt."""

    def test_prompt_embeds_language_and_text(self):
        from refinement.prompts import get_refinement_prompt

        prompt = get_refinement_prompt("i have {pain}", "English")

        assert 'Original message in English: "i have {pain}"' in prompt
        assert "dental" in prompt
        assert prompt.rstrip().endswith("written.")


class TestEmptyAnswer:
    """An answer without candidate text falls back to the trimmed input."""

    @pytest.mark.asyncio
    async def test_fallback_is_trimmed(self, mock_gemini):
        from refinement.refiner import Refiner

        mock_gemini.generate.return_value = None

        result = await Refiner("gemini", mock_gemini).refine("  hola  \n", "Spanish")

        assert result.refined_text == "hola"
        assert result.refined is False

    @pytest.mark.asyncio
    async def test_failure_fallback_is_untouched(self, mock_gemini):
        from core.exceptions import RefinementFailure
        from refinement.refiner import Refiner

        mock_gemini.generate.side_effect = RefinementFailure("gemini", "HTTP 500")

        result = await Refiner("gemini", mock_gemini).refine("  hola  ", "Spanish")

        assert result.refined_text == "  hola  "
