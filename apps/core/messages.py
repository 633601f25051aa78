"""Error payload flattening shared by the exception handler and the renderer."""


def error_message(data):
    """
    Flatten a DRF error payload into a single string.

    Handles plain strings, ``{"detail": ...}``, ``{"error": ...}`` and
    serializer error dicts (``{"field": ["msg"]}`` becomes ``"field: msg"``).
    """
    if data is None:
        return 'Unknown error'
    if isinstance(data, str):
        return str(data)
    if isinstance(data, (list, tuple)):
        return '; '.join(error_message(item) for item in data)
    if isinstance(data, dict):
        if 'error' in data:
            return error_message(data['error'])
        if 'detail' in data:
            return error_message(data['detail'])
        parts = []
        for field, value in data.items():
            message = error_message(value)
            if field == 'non_field_errors':
                parts.append(message)
            else:
                parts.append(f'{field}: {message}')
        return '; '.join(parts)
    return str(data)
