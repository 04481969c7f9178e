################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################

"""Global constants used to access environment variables."""

import os
import typing as t

# ------------------------------- IBM Cloud ----------------------------------

API_KEY_ENV = "IBMCLOUD_API_KEY"
"""
IBM Cloud API key used to authenticate with IAM. Never written to the config file.
"""

IAM_ENDPOINT_ENV = "IBMCLOUD_IAM_API_ENDPOINT"
"""
Overrides the IAM endpoint.
Example:
    IBMCLOUD_IAM_API_ENDPOINT=https://private.iam.cloud.ibm.com
"""

RESOURCE_CONTROLLER_ENDPOINT_ENV = "IBMCLOUD_RESOURCE_CONTROLLER_API_ENDPOINT"
"""
Overrides the Resource Controller endpoint.
Example:
    IBMCLOUD_RESOURCE_CONTROLLER_API_ENDPOINT=https://private.resource-controller.cloud.ibm.com
"""  # noqa: E501

POWER_ENDPOINT_ENV = "IBMCLOUD_POWER_API_ENDPOINT"
"""
Overrides the PowerVS endpoint. By default it's derived from the workspace zone.
Example:
    IBMCLOUD_POWER_API_ENDPOINT=https://dal.power-iaas.test.cloud.ibm.com
"""

# --------------------------------- Library ----------------------------------

CONFIG_PATH_ENV = "POWERVS_CONFIG_PATH"
"""
Used to configure the location of the `config.json`
Example:
    POWERVS_CONFIG_PATH=/tmp/config.json
"""

VERBOSE_ENV = "POWERVS_VERBOSE"
"""
If set to a truthy value, enables printing debug information to stderr.
"""

# ------------------------------- utilities ----------------------------------


def _is_truthy(env_var_value: t.Optional[str]):
    if env_var_value is None:
        return False

    return env_var_value.lower() in {"1", "true"}


def flag_set(env_var_name: str) -> bool:
    value = os.getenv(env_var_name)
    return _is_truthy(value)
