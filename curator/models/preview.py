from pydantic import BaseModel


class PreviewProfile(BaseModel):
    """The simulated viewer a preview session runs as."""

    user_id: str
    username: str | None = None
    country: str = "KSA"
    timezone: str = "Asia/Riyadh"
    user_type: str = "Registered"
    package_type: str = "VIP"
