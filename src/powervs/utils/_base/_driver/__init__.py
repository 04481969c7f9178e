################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
