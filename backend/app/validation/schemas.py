# JSON schemas for the three generate* request bodies.
# client_secret is checked by the gate before these run, so it is not required here.

_NEXT_STEPS = {
    "type": ["string", "null"],
    "description": "Free-form style / next-step writing tips",
}

_QUERY_DESCRIPTOR = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "note_text": {"type": ["string", "null"]},
        "queryBody": {
            "type": "object",
            "properties": {
                "fields": {
                    "oneOf": [
                        {"type": "string"},
                        {"type": "array", "items": {"type": "string"}},
                    ]
                }
            },
            "required": ["fields"],
        },
        "queryData": {"description": "Any JSON value, serialized verbatim into the prompt"},
    },
    "required": ["title", "queryBody", "queryData"],
}

REQUEST_SCHEMAS: dict[str, dict] = {
    "generateQuerySummary": {
        "type": "object",
        "properties": {
            "client_secret": {"type": "string"},
            "query": _QUERY_DESCRIPTOR,
            "description": {"type": ["string", "null"]},
            "nextStepsInstructions": _NEXT_STEPS,
        },
        "required": ["query"],
    },
    "generateSummary": {
        "type": "object",
        "properties": {
            "client_secret": {"type": "string"},
            "querySummaries": {"type": "array", "items": {"type": "string"}},
            "nextStepsInstructions": _NEXT_STEPS,
        },
        "required": ["querySummaries"],
    },
    "generateQuerySuggestions": {
        "type": "object",
        "properties": {
            "client_secret": {"type": "string"},
            "queryResults": {"description": "Raw query results, any JSON value"},
            "querySummaries": {"description": "Prior summaries, any JSON value"},
            "nextStepsInstructions": _NEXT_STEPS,
        },
        "required": ["queryResults", "querySummaries"],
    },
}
