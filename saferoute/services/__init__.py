"""
Services layer - business logic, kept out of the routes.

- enrichment_service: raw report -> Incident (location + category)
- geocoding: location resolution chain
- classification: zero-shot category with keyword fallback
- incident_store / stats_service: persistence and aggregates
"""
