# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Ports and use-case services of the clinic domain.
# ============================================================================
