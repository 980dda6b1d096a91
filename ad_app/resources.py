"""Registry of remote list resources and the routes built from them."""

from __future__ import annotations

from dataclasses import dataclass

from ad_common.errors import ConfigurationError

EntityId = str


@dataclass(frozen=True)
class ResourceSpec:
    """How one entity kind is listed remotely and where its screens live."""

    kind: str
    endpoint: str
    rows_key: str
    create_path: str | None = None
    edit_path: str | None = None
    detail_path: str | None = None
    label: str = ""

    def build_edit_path(self, entity_id: EntityId) -> str | None:
        return _fill(self.edit_path, entity_id)

    def build_detail_path(self, entity_id: EntityId) -> str | None:
        return _fill(self.detail_path, entity_id)

    def entity_path(self, entity_id: EntityId) -> str:
        """REST path of a single entity, used by delete."""
        return f"{self.endpoint.rstrip('/')}/{entity_id}"


def _fill(template: str | None, entity_id: EntityId) -> str | None:
    if template is None:
        return None
    return template.replace(":id", str(entity_id))


RESOURCES: dict[str, ResourceSpec] = {
    spec.kind: spec
    for spec in (
        ResourceSpec(
            kind="categories",
            endpoint="/category",
            rows_key="categories",
            create_path="/app/new-cat",
            edit_path="/app/new-cat/:id",
            label="Categories",
        ),
        ResourceSpec(
            kind="shops",
            endpoint="/shop",
            rows_key="shops",
            create_path="/app/new-shop",
            edit_path="/app/new-shop/:id",
            detail_path="/app/shop-details/:id",
            label="Shops",
        ),
        ResourceSpec(
            kind="vehicles",
            endpoint="/vehicle",
            rows_key="vehicles",
            create_path="/app/new-vehicle",
            edit_path="/app/new-vehicle/:id",
            label="Vehicles",
        ),
        ResourceSpec(
            kind="users",
            endpoint="/user",
            rows_key="users",
            create_path="/app/user-new",
            edit_path="/app/user-edit/:id",
            detail_path="/app/user-details/:id",
            label="Users",
        ),
        ResourceSpec(
            kind="clients",
            endpoint="/client",
            rows_key="clients",
            create_path="/app/client-new",
            edit_path="/app/client-new/:id",
            label="Clients",
        ),
        ResourceSpec(
            kind="projects",
            endpoint="/project",
            rows_key="projects",
            create_path="/app/project-new",
            detail_path="/app/project-view/:id",
            label="Projects",
        ),
    )
}


def get_resource(kind: str) -> ResourceSpec:
    try:
        return RESOURCES[kind]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown resource kind: {kind}",
            context={"known": sorted(RESOURCES)},
            cause=exc,
        ) from exc
