"""
SPI Forecast Service

Societal Pressure Index timeline for a selected country, extended with a
forecast from an external prediction service.

Layer Structure:
- Domain: Economic profiles, preset catalog, snapshot synthesis, reconciliation
- Application: Forecast orchestrator, use cases and DTOs
- Infrastructure: Prediction service gateway and health checks
- Presentation: FastAPI controllers
- Shared: Constants and logging
- Main: Composition root, settings and entry point
"""
