"""
Project-wide constants for gemini-flows
"""  # noqa: D200, D212, D415

# ==============================================================================
# Models
# ==============================================================================

DEFAULT_TEXT_MODEL = "gemini-2.0-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.0-flash-exp"

# Gemini image output requires both modalities in the request
IMAGE_RESPONSE_MODALITIES = ("TEXT", "IMAGE")

# ==============================================================================
# User-facing messages
# ==============================================================================

EMPTY_PROMPT_MESSAGE = "Prompt cannot be empty."
NO_IMAGE_URL_MESSAGE = "Image generation succeeded but no image URL was returned. "
NO_TEXT_RESPONSE_SUFFIX = "No additional text response."
EMPTY_TEXT_MESSAGE = "The model returned an empty response."
UNPARSEABLE_RESPONSE_MESSAGE = "The model response could not be understood. Please try again."

SAFETY_BLOCKED_MESSAGE = (
    "The request was blocked by safety filters. Please adjust your prompt."
)
MODALITY_UNSUPPORTED_MESSAGE = (
    "The AI model had an issue with the requested response type. "
    "Please try a different prompt or style."
)
BACKEND_UNAVAILABLE_MESSAGE = (
    "The AI service is temporarily unavailable. Please try again shortly."
)
UNKNOWN_FAILURE_MESSAGE = "Generation failed. Please try again."

FALLBACK_CHAT_REPLY = "Hmm, I am not sure how to respond to that. 🤔 Maybe try again?"

# ==============================================================================
# Chat transcript format
# ==============================================================================

USER_LABEL = "User"
AGENT_LABEL = "AI"

# ==============================================================================
# Logo fan-out
# ==============================================================================

LOGO_STYLE_PREFIXES = (
    "Minimalist logo design for: ",
    "Abstract logo mark representing: ",
    "Emblem style logo, theme: ",
    "Modern wordmark with a symbol for: ",
    "Geometric shape logo for: ",
    "Flat design, iconic logo for: ",
    "Sleek and professional logo for: ",
    "Playful and creative logo for: ",
    "Corporate identity logo for: ",
    "Tech startup brand mark for: ",
)

# ==============================================================================
# Password flow
# ==============================================================================

PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 128
PASSWORD_FALLBACK = "ErrorGeneratingP@ssword!"

# ==============================================================================
# URL shortener
# ==============================================================================

SHORT_URL_BASE = "https://pop.gpt/"
SHORT_URL_PATH_LENGTH = 6
SHORT_URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
SHORT_URL_DISCLAIMER = (
    "This is a simulated short URL for demonstration purposes only. It is NOT a "
    "live, working link and will not redirect on the internet. Real URL shorteners "
    "require backend infrastructure to manage links and redirections."
)
