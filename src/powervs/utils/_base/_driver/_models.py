################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Internal models for the IBM Cloud APIs used by the package.

Only the fields we read are modelled; everything else in the payloads is ignored.
"""
from typing import List, Optional

import pydantic

WorkspaceID = str
PVMInstanceID = str
DHCPServerID = str


class _APIModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")


# --- IAM ---


class IAMTokenResponse(_APIModel):
    """
    Implements:
        https://cloud.ibm.com/apidocs/iam-identity-token-api#gettoken-apikey
    """

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    expiration: Optional[int] = None


# --- Resource Controller ---


class ResourceInstance(_APIModel):
    """
    Implements:
        https://cloud.ibm.com/apidocs/resource-controller/resource-controller#list-resource-instances
    """

    id: Optional[str] = None
    guid: Optional[str] = None
    crn: Optional[str] = None
    name: Optional[str] = None
    region_id: Optional[str] = None
    state: Optional[str] = None


class ListResourceInstancesRequest(_APIModel):
    resource_id: str
    resource_plan_id: str
    name: Optional[str] = None
    start: Optional[str] = None
    limit: Optional[int] = None


class ResourceInstancesList(_APIModel):
    rows_count: Optional[int] = None
    next_url: Optional[str] = None
    resources: List[ResourceInstance] = []


# --- PowerVS instances ---


class PVMInstanceNetwork(_APIModel):
    networkID: Optional[str] = None
    networkName: Optional[str] = None
    ipAddress: Optional[str] = None
    macAddress: Optional[str] = None
    externalIP: Optional[str] = None
    type: Optional[str] = None


class PVMInstanceReference(_APIModel):
    """
    Implements:
        https://cloud.ibm.com/apidocs/power-cloud#pcloud-pvminstances-getall
    """

    pvmInstanceID: PVMInstanceID
    serverName: Optional[str] = None
    status: Optional[str] = None


class PVMInstances(_APIModel):
    pvmInstances: List[Optional[PVMInstanceReference]] = []


class PVMInstance(_APIModel):
    """
    Implements:
        https://cloud.ibm.com/apidocs/power-cloud#pcloud-pvminstances-get
    """

    pvmInstanceID: PVMInstanceID
    serverName: Optional[str] = None
    status: Optional[str] = None
    sysType: Optional[str] = None
    procType: Optional[str] = None
    processors: Optional[float] = None
    memory: Optional[float] = None
    imageID: Optional[str] = None
    networks: List[PVMInstanceNetwork] = []


# --- DHCP ---


class DHCPServerNetwork(_APIModel):
    id: Optional[str] = None
    name: Optional[str] = None


class DHCPServer(_APIModel):
    """
    Implements:
        https://cloud.ibm.com/apidocs/power-cloud#pcloud-dhcp-getall
    """

    id: DHCPServerID
    network: Optional[DHCPServerNetwork] = None
    status: Optional[str] = None


ListDHCPServersResponse = List[DHCPServer]


class DHCPServerLease(_APIModel):
    instanceIP: Optional[str] = None
    instanceMacAddress: Optional[str] = None


class DHCPServerDetail(DHCPServer):
    """
    Implements:
        https://cloud.ibm.com/apidocs/power-cloud#pcloud-dhcp-get
    """

    leases: List[DHCPServerLease] = []
