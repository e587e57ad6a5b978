"""Session loop, configuration, and telemetry.

Import submodules directly (``view_engine.runtime.session``); this package
stays empty so lower layers can depend on ``telemetry`` without cycles.
"""
