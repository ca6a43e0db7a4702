# quimica/messages.py

# Textos devolvidos ao cliente, por locale.
MESSAGES = {
    "pt-BR": {
        "invalid_formula": "Fórmula inválida.",
        "no_reaction": "Sem reação.",
        "unavailable": "Serviço de previsão indisponível.",
        "internal_error": "Falha ao processar reação.",
    },
    "en": {
        "invalid_formula": "Invalid formula.",
        "no_reaction": "No reaction.",
        "unavailable": "Prediction service unavailable.",
        "internal_error": "Failed to process reaction.",
    },
}

DEFAULT_LOCALE = "pt-BR"
