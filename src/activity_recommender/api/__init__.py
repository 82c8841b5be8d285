"""FastAPI application and routes.

## API Structure

- /api/activities - Activity catalog and browse filter
- /api/recommendations - Weather-based activity recommendations
- /api/air-quality - Air quality descriptions
- /health - Health check
"""

from activity_recommender.api.app import create_app

__all__ = ["create_app"]
