from gistfolio.application.services.admin_store import AdminStore
from gistfolio.application.services.portfolio_store import PortfolioStore
from gistfolio.application.services.results import ActionResult
from gistfolio.application.services.video_preview import VideoPreview

__all__ = ["ActionResult", "AdminStore", "PortfolioStore", "VideoPreview"]
