# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Adapters behind the clinic application ports.
# ============================================================================
