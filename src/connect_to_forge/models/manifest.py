"""Pydantic models for the Forge manifest (manifest.yml)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ForgeBase(BaseModel):
    """Base class for manifest elements. Unknown keys are preserved."""

    model_config = ConfigDict(extra="allow")


class AppConnect(ForgeBase):
    key: str = Field(..., description="Connect app key the Forge app adopts.")
    authentication: str | None = Field(
        default=None,
        description="Authentication scheme for Connect callbacks ('jwt').",
    )
    remote: str = Field(..., description="Key of the remote serving Connect calls.")


class AppRuntime(ForgeBase):
    name: str = Field(..., description="Forge runtime identifier.")


class AppLicensing(ForgeBase):
    enabled: bool = Field(..., description="Whether the app is paid via Marketplace.")


class App(ForgeBase):
    id: str = Field(..., description="Forge app ARI.")
    connect: AppConnect
    runtime: AppRuntime
    licensing: AppLicensing | None = None


class RemoteStorage(ForgeBase):
    inScopeEUD: bool = Field(
        ..., description="Whether end-user data is stored on the remote."
    )


class Remote(ForgeBase):
    """
    A remote backend the app egresses data to.

    `baseUrl` is either a single URL or a mapping of region name to URL
    with a mandatory 'default' entry.
    """

    key: str
    baseUrl: str | dict[str, Any]
    operations: list[str] | None = Field(
        default=None,
        description="Purposes of data egress: storage, compute, fetch, other.",
    )
    storage: RemoteStorage | None = None


class Permissions(ForgeBase):
    scopes: list[str] = Field(default_factory=list)


class ForgeManifest(ForgeBase):
    """Root of a Forge manifest generated from a Connect descriptor."""

    app: App
    remotes: list[Remote] = Field(default_factory=list)
    modules: dict[str, list[dict[str, Any]]] | None = Field(
        default=None,
        description="Forge-native modules, e.g. 'migration:dataResidency'.",
    )
    connectModules: dict[str, list[Any]] = Field(
        default_factory=dict,
        description="'<product>:<moduleType>' to a list of Connect modules.",
    )
    permissions: Permissions = Field(default_factory=Permissions)

