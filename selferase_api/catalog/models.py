"""Immutable catalog data contracts for public broker information."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OptOutMethod:
    """How a broker accepts removal requests.

    Attributes:
        method_type: Channel label (`online_form`, `email`, ...).
        instructions: Short human-readable instructions.
        steps: Ordered opt-out steps.
        template_id: Optional template identifier for written requests.
    """

    method_type: str
    instructions: str
    steps: tuple[str, ...] = ()
    template_id: str | None = None


@dataclass(frozen=True)
class BrokerProfile:
    """Public directory entry for one broker.

    Attributes:
        broker_id: Opaque broker identifier key.
        name: Display name.
        description: Short description of the service.
        website: Broker home page.
        opt_out_url: Canonical opt-out endpoint, also used as probe target.
        category: Directory category label.
        data_types: Kinds of data the broker republishes.
        opt_out_method: Removal channel description.
        required_fields: Field names the broker asks for.
        estimated_response_days: Typical processing time.
        is_active: Whether the broker is currently listed for opt-out.
        contact_email: Optional opt-out mailbox.
    """

    broker_id: str
    name: str
    description: str
    website: str
    opt_out_url: str
    category: str
    data_types: tuple[str, ...]
    opt_out_method: OptOutMethod
    required_fields: tuple[str, ...]
    estimated_response_days: int
    is_active: bool = True
    contact_email: str | None = None


@dataclass(frozen=True)
class BrokerCatalog:
    """Static data set behind the registry and directory lookups.

    Attributes:
        brokers: Broker profiles in listing order.
        categories: Category labels in listing order.
        templates: Template text by template identifier.
    """

    brokers: tuple[BrokerProfile, ...]
    categories: tuple[str, ...]
    templates: dict[str, str] = field(default_factory=dict)


def catalog_serialize_broker_profile(profile: BrokerProfile) -> dict[str, object]:
    """Serialize one broker profile to its JSON payload.

    Args:
        profile: Broker profile.

    Returns:
        dict[str, object]: JSON-serializable payload with camelCase keys.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    opt_out_method: dict[str, object] = {"type": profile.opt_out_method.method_type}
    if profile.opt_out_method.template_id is not None:
        opt_out_method["templateId"] = profile.opt_out_method.template_id
    opt_out_method["instructions"] = profile.opt_out_method.instructions
    opt_out_method["steps"] = list(profile.opt_out_method.steps)

    payload: dict[str, object] = {
        "id": profile.broker_id,
        "name": profile.name,
        "description": profile.description,
        "website": profile.website,
        "optOutUrl": profile.opt_out_url,
        "category": profile.category,
        "dataTypes": list(profile.data_types),
        "optOutMethod": opt_out_method,
    }
    if profile.contact_email is not None:
        payload["contactEmail"] = profile.contact_email
    payload["requiredFields"] = list(profile.required_fields)
    payload["estimatedResponseDays"] = profile.estimated_response_days
    payload["isActive"] = profile.is_active
    return payload
