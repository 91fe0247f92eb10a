# ============================================================================
# dockdemo/server/__init__.py
# Server Package - FastAPI Web Server
# ============================================================================
#
# PURPOSE:
# The HTTP API the browser dashboard talks to.
#
# KEY ENDPOINTS:
# - GET /api/status - counters, logs and process facts
# - POST /api/test/{scenario} - run one scripted scenario
# - GET /api/logs/{category} - retained log lines for one category
# - POST /api/reset - back to the baseline counters
# - GET /health - liveness probe
#
# KEY MODULES:
# - **api.py**: application factory, error handlers, uvicorn entry point
# - **state.py**: shared ApplicationState (state holder + step runner)
# - **routers/**: the endpoints above
#
# ============================================================================
