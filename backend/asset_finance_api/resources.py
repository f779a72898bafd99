"""
Resource registry.

Declares every resource the API serves and how they nest. This is the only
place that ties models, transfer models and URLs together; the app factory
builds one router per entry.

    asset-finance-agreements
    ├── assets
    │   ├── delivery-records
    │   ├── pickup-records
    │   ├── return-records
    │   ├── service-events
    │   └── usage-records
    └── end-options
"""

from asset_finance_api.models import (
    AssetFinanceAgreement,
    AssetFinanceAsset,
    DeliveryRecord,
    EndOption,
    PickupRecord,
    ReturnRecord,
    ServiceEvent,
    UsageRecord,
)
from asset_finance_api.schemas import (
    AgreementInput,
    AgreementOutput,
    AssetInput,
    AssetOutput,
    DeliveryRecordInput,
    DeliveryRecordOutput,
    EndOptionInput,
    EndOptionOutput,
    PickupRecordInput,
    PickupRecordOutput,
    ReturnRecordInput,
    ReturnRecordOutput,
    ServiceEventInput,
    ServiceEventOutput,
    UsageRecordInput,
    UsageRecordOutput,
)
from asset_finance_api.services import ResourceDefinition, ResourceRegistry


AGREEMENT_LINK = "asset_finance_agreement_id"
ASSET_LINK = "asset_finance_asset_id"


AGREEMENTS = ResourceDefinition(
    path="asset-finance-agreements",
    entity_name="Asset finance agreement",
    model=AssetFinanceAgreement,
    input_schema=AgreementInput,
    output_schema=AgreementOutput,
    id_field="asset_finance_agreement_id",
    id_param="agreement_id",
    tag="agreements",
)

# Children of an agreement

ASSETS = ResourceDefinition(
    path="assets",
    entity_name="Asset",
    model=AssetFinanceAsset,
    input_schema=AssetInput,
    output_schema=AssetOutput,
    id_field="asset_finance_asset_id",
    id_param="asset_id",
    parent=AGREEMENTS,
    parent_field=AGREEMENT_LINK,
    tag="assets",
)

END_OPTIONS = ResourceDefinition(
    path="end-options",
    entity_name="End option",
    model=EndOption,
    input_schema=EndOptionInput,
    output_schema=EndOptionOutput,
    id_field="end_option_id",
    id_param="end_option_id",
    parent=AGREEMENTS,
    parent_field=AGREEMENT_LINK,
    tag="end-options",
)

# Children of an asset

DELIVERY_RECORDS = ResourceDefinition(
    path="delivery-records",
    entity_name="Delivery record",
    model=DeliveryRecord,
    input_schema=DeliveryRecordInput,
    output_schema=DeliveryRecordOutput,
    id_field="delivery_record_id",
    id_param="delivery_record_id",
    parent=ASSETS,
    parent_field=ASSET_LINK,
    tag="delivery-records",
)

PICKUP_RECORDS = ResourceDefinition(
    path="pickup-records",
    entity_name="Pickup record",
    model=PickupRecord,
    input_schema=PickupRecordInput,
    output_schema=PickupRecordOutput,
    id_field="pickup_record_id",
    id_param="pickup_record_id",
    parent=ASSETS,
    parent_field=ASSET_LINK,
    tag="pickup-records",
)

RETURN_RECORDS = ResourceDefinition(
    path="return-records",
    entity_name="Return record",
    model=ReturnRecord,
    input_schema=ReturnRecordInput,
    output_schema=ReturnRecordOutput,
    id_field="return_record_id",
    id_param="return_record_id",
    parent=ASSETS,
    parent_field=ASSET_LINK,
    tag="return-records",
)

SERVICE_EVENTS = ResourceDefinition(
    path="service-events",
    entity_name="Service event",
    model=ServiceEvent,
    input_schema=ServiceEventInput,
    output_schema=ServiceEventOutput,
    id_field="service_event_id",
    id_param="service_event_id",
    parent=ASSETS,
    parent_field=ASSET_LINK,
    tag="service-events",
)

USAGE_RECORDS = ResourceDefinition(
    path="usage-records",
    entity_name="Usage record",
    model=UsageRecord,
    input_schema=UsageRecordInput,
    output_schema=UsageRecordOutput,
    id_field="usage_record_id",
    id_param="usage_record_id",
    parent=ASSETS,
    parent_field=ASSET_LINK,
    tag="usage-records",
)


REGISTRY = ResourceRegistry([
    AGREEMENTS,
    ASSETS,
    END_OPTIONS,
    DELIVERY_RECORDS,
    PICKUP_RECORDS,
    RETURN_RECORDS,
    SERVICE_EVENTS,
    USAGE_RECORDS,
])
