"""Application layer: requests, handlers, projections and dispatch."""
