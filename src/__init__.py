# Review Relay - WhatsApp Review Collection Webhooks
# ===================================================
# A stateless webhook relay using Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI webhook routes (web/)
# - Domain:         Request-scoped values and pure decisions (domain/)
# - Infrastructure: External services (WhatsApp, Google, signatures, config)
#
# Flow: Razorpay payment.captured -> WhatsApp rating prompt -> star reply
#       -> upload/feedback request -> review content -> review publisher
