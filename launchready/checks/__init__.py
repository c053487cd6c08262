"""Category checks. One module per readiness category; see engine.REGISTRY."""
