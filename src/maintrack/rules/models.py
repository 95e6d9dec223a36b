from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class RbacRules(BaseModel):
    roles: dict[str, list[str]]
    public_permissions: list[str] = Field(default_factory=list)

class AuthRules(BaseModel):
    password_min_length: int = 8
    access_token_ttl_minutes: int = 60 * 24
    signup_enabled: bool = True
    signup_default_role: str = "technician"

class AssetFieldRules(BaseModel):
    id_max_length: int = 20
    name_max_length: int = 50
    os_max_length: int = 50
    type_max_length: int = 50
    failure_points_max_length: int = 200

class MaintenanceRules(BaseModel):
    preventive_interval_months: int = Field(default=6, ge=1)

class SuggestionRules(BaseModel):
    history_limit: int = Field(default=5, ge=0)
    model: str = "gpt-4o-mini"
    timeout_seconds: float = 20.0
    max_tokens: int = 600
    temperature: float = 0.2
    fallback_message: str = (
        "Could not fetch AI suggestions. Check the connection or try again later."
    )

class DashboardRules(BaseModel):
    upcoming_window_days: int = Field(default=14, ge=0)
    include_maintenance_alerts: bool = True

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    rbac: RbacRules
    auth: AuthRules = Field(default_factory=AuthRules)
    assets: AssetFieldRules = Field(default_factory=AssetFieldRules)
    maintenance: MaintenanceRules = Field(default_factory=MaintenanceRules)
    suggestions: SuggestionRules = Field(default_factory=SuggestionRules)
    dashboard: DashboardRules = Field(default_factory=DashboardRules)
    ops: OpsRules = Field(default_factory=OpsRules)
