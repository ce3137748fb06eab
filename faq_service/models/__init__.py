from faq_service.models.faq import FAQ, utc_now_iso

__all__ = ["FAQ", "utc_now_iso"]
