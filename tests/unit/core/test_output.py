# tests/unit/core/test_output.py
# Unit tests for the pure session output seam & its registry

from chronoterm.core.output import (
    OutputLevel,
    SessionOutput,
    SilentOutput,
    get_output_manager,
    set_output_manager,
    reset_output_manager,
)


class TestSilentOutput:

    # * Verify verbose & debug are off & every call is a no-op
    def test_silent(self):

        output = SilentOutput()
        assert output.is_verbose_enabled() is False
        assert output.is_debug_enabled() is False

        output.start_session()
        with output.muted_console():
            output.verbose("dropped", "TIMER")
        output.end_session()

    # * Verify SilentOutput satisfies SessionOutput
    def test_implements_protocol(self):

        assert isinstance(SilentOutput(), SessionOutput)

    # * Verify levels order from quietest to noisiest
    def test_level_ordering(self):

        assert OutputLevel.NORMAL < OutputLevel.VERBOSE < OutputLevel.DEBUG


class TestRegistry:

    # * Verify the default registration is silent
    def test_default_is_silent(self):

        assert isinstance(get_output_manager(), SilentOutput)

    # * Verify set & reset
    def test_set_then_reset(self):

        custom = SilentOutput()
        set_output_manager(custom)
        assert get_output_manager() is custom

        reset_output_manager()
        assert isinstance(get_output_manager(), SilentOutput)
        assert get_output_manager() is not custom
