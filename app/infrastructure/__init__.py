"""Infrastructure modules for the fare estimator web app.

Centralized infrastructure components:
- configuration: Settings management (settings, LocalizationSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- i18n: Locales, negotiation, active locale state and translations
- routing: Locale-aware route paths, guard and switch controller
- services: Dependency injection services (SettingsDep, get_settings)
"""
