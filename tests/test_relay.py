"""
Tests for translation/relay.py - request dispatcher.
"""
import pytest
from unittest.mock import AsyncMock

from translation.schemas import TranslationRequest


@pytest.fixture
def make_relay(mock_gemini, mock_mymemory):
    from refinement.refiner import Refiner
    from translation.relay import TranslationRelay
    from translation.translator import Translator

    def _make(settings):
        refiner = Refiner(settings.ai_provider, mock_gemini)
        return TranslationRelay(settings, refiner, Translator(mock_mymemory))

    return _make


class TestValidation:
    """Requests missing text or target never reach a provider."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"target": "English"},
        {"text": "hola"},
        {"text": "", "target": "English"},
        {},
    ])
    async def test_missing_fields_raise_bad_request(self, make_relay, settings, mock_gemini, mock_mymemory, body):
        from core.exceptions import BadRequest

        relay = make_relay(settings)

        with pytest.raises(BadRequest, match="Missing text or target"):
            await relay.relay(TranslationRequest(**body))

        mock_gemini.generate.assert_not_called()
        mock_mymemory.lookup.assert_not_called()


    @pytest.mark.asyncio
    async def test_whitespace_text_is_forwarded(self, make_relay, settings_disabled, mock_mymemory):
        relay = make_relay(settings_disabled)

        await relay.relay(TranslationRequest(text="   ", target="English", source="Spanish"))

        mock_mymemory.lookup.assert_awaited_once_with("   ", "es", "en")


class TestRefinementStep:
    """Tests for the conditional refinement step."""

    @pytest.mark.asyncio
    async def test_refined_text_is_translated(self, make_relay, settings, mock_gemini, mock_mymemory):
        relay = make_relay(settings)

        await relay.relay(TranslationRequest(text="hola como esta", target="English", source="Spanish"))

        mock_gemini.generate.assert_awaited_once()
        mock_mymemory.lookup.assert_awaited_once_with("Hola, ¿cómo está?", "es", "en")

    @pytest.mark.asyncio
    async def test_refine_false_skips_refinement(self, make_relay, settings, mock_gemini, mock_mymemory):
        relay = make_relay(settings)

        await relay.relay(TranslationRequest(text="hola", target="English", source="Spanish", refine=False))

        mock_gemini.generate.assert_not_called()
        mock_mymemory.lookup.assert_awaited_once_with("hola", "es", "en")

    @pytest.mark.asyncio
    async def test_refine_null_still_refines(self, make_relay, settings, mock_gemini):
        relay = make_relay(settings)

        await relay.relay(TranslationRequest(text="hola", target="English", refine=None))

        mock_gemini.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_provider_none_skips_refinement(self, make_relay, settings_disabled, mock_gemini):
        relay = make_relay(settings_disabled)

        await relay.relay(TranslationRequest(text="hola", target="English"))

        mock_gemini.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_language_in_prompt(self, make_relay, settings, mock_gemini):
        relay = make_relay(settings)

        await relay.relay(TranslationRequest(text="hello", target="Spanish"))

        assert "Original message in English" in mock_gemini.generate.call_args.args[0]

    @pytest.mark.asyncio
    async def test_refinement_failure_uses_original_text(self, make_relay, settings, mock_gemini, mock_mymemory):
        from core.exceptions import RefinementFailure

        mock_gemini.generate.side_effect = RefinementFailure("gemini", "timed out after 10s")
        relay = make_relay(settings)

        response = await relay.relay(TranslationRequest(text="hola", target="English", source="Spanish"))

        assert response.translation == "hello"
        mock_mymemory.lookup.assert_awaited_once_with("hola", "es", "en")

    @pytest.mark.asyncio
    async def test_unexpected_refiner_error_uses_original_text(self, make_relay, settings, mock_mymemory):
        relay = make_relay(settings)
        relay.refiner.refine = AsyncMock(side_effect=RuntimeError("boom"))

        await relay.relay(TranslationRequest(text="hola", target="English", source="Spanish"))

        mock_mymemory.lookup.assert_awaited_once_with("hola", "es", "en")


class TestLanguageResolution:
    """Tests for source/target resolution."""

    @pytest.mark.asyncio
    async def test_unknown_names_pass_through(self, make_relay, settings_disabled, mock_mymemory):
        relay = make_relay(settings_disabled)

        await relay.relay(TranslationRequest(text="hola", target="ko", source="es-MX"))

        mock_mymemory.lookup.assert_awaited_once_with("hola", "es-MX", "ko")

    @pytest.mark.asyncio
    async def test_missing_source_runs_detection(self, make_relay, settings_disabled, mock_mymemory):
        relay = make_relay(settings_disabled)

        response = await relay.relay(TranslationRequest(text="hola", target="English"))

        assert response.translation == "hello"
        assert [c.args for c in mock_mymemory.lookup.await_args_list] == [
            ("hola", "en", "en"),
            ("hola", "es", "en"),
        ]

    @pytest.mark.asyncio
    async def test_detection_uses_refined_text(self, make_relay, settings, mock_mymemory):
        relay = make_relay(settings)

        await relay.relay(TranslationRequest(text="hola como esta", target="English"))

        probe = mock_mymemory.lookup.await_args_list[0]
        assert probe.args == ("Hola, ¿cómo está?", "en", "en")


class TestTranslationStep:
    """Tests for the translation result."""

    @pytest.mark.asyncio
    async def test_scenario_spanish_to_english(self, make_relay, settings, mock_mymemory):
        relay = make_relay(settings)

        response = await relay.relay(
            TranslationRequest(text="hola", target="English", source="Spanish", refine=False)
        )

        assert response.translation == "hello"
        mock_mymemory.lookup.assert_awaited_once_with("hola", "es", "en")

    @pytest.mark.asyncio
    async def test_missing_field_returns_marker(self, make_relay, settings_disabled, mock_mymemory):
        mock_mymemory.lookup.return_value = {"responseStatus": 200}
        relay = make_relay(settings_disabled)

        response = await relay.relay(TranslationRequest(text="hola", target="English", source="Spanish"))

        assert response.translation == "Error: no translation"

    @pytest.mark.asyncio
    async def test_close_closes_both_providers(self, make_relay, settings, mock_gemini, mock_mymemory):
        await make_relay(settings).close()

        mock_gemini.close.assert_awaited_once()
        mock_mymemory.close.assert_awaited_once()


class TestProviderInfo:
    """Tests for TranslationRelay.provider_info."""

    def test_reports_both_clients(self, make_relay, settings, mock_gemini, mock_mymemory):
        info = make_relay(settings).provider_info()

        assert info["refinement"]["name"] == "gemini"
        assert info["translation"]["name"] == "mymemory"
