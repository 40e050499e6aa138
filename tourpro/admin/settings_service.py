import logging
from sqlalchemy.orm import Session
from tourpro.models import SiteSettings
from tourpro.exceptions import InputValidationError
from tourpro.admin.schemas import SiteSettingsUpdate

logger = logging.getLogger(__name__)

# Columns that may not be cleared to NULL
REQUIRED_FIELDS = {
    "site_name", "currency", "currency_symbol", "timezone", "max_bookings_per_user",
    "maintenance_mode", "email_notifications", "sms_notifications"
}

class SiteSettingsService:
    """Single-record store for site configuration"""

    def __init__(self, db: Session):
        self.db = db

    def get_settings(self) -> SiteSettings:
        """Return the settings row, creating it with defaults on first access"""
        settings = self.db.query(SiteSettings).order_by(SiteSettings.id).first()
        if settings is None:
            settings = SiteSettings()
            self.db.add(settings)
            self.db.commit()
            self.db.refresh(settings)
            logger.info("Created default site settings")
        return settings

    def update_settings(self, update: SiteSettingsUpdate, updated_by_id: int) -> SiteSettings:
        settings = self.get_settings()
        update_data = update.dict(exclude_unset=True)

        cleared = sorted(field for field in REQUIRED_FIELDS if field in update_data and update_data[field] is None)
        if cleared:
            raise InputValidationError(f"Settings cannot be empty: {', '.join(cleared)}")

        if update_data.get("currency"):
            update_data["currency"] = update_data["currency"].upper()

        for field, value in update_data.items():
            setattr(settings, field, value)

        self.db.commit()
        self.db.refresh(settings)

        logger.info(f"Site settings updated by user {updated_by_id}: {', '.join(sorted(update_data)) or 'no changes'}")
        return settings
