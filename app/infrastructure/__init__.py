"""Infrastructure modules for Lango.

Centralized infrastructure components:
- configuration: Settings management (Settings, settings)
- logging: Structured logging setup (configure_logging, get_module_logger)
- models: API response envelopes and the shared validated model base
- operations: Operation results and OpenAI error classification
- services: Dependency injection providers (SettingsDep, TranslationStoreDep, get_settings)
"""
