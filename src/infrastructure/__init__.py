# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - whatsapp/: WhatsApp Cloud API template messages
# - reviews/: Google Business Profile stand-in and owner alerts
# - security/: webhook signature verification
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting the domain layer.
