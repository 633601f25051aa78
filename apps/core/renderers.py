from rest_framework.renderers import JSONRenderer

from .messages import error_message


class EnvelopeJSONRenderer(JSONRenderer):
    """
    Wrap every payload as ``{"data": ..., "error": ...}``.

    Successful responses carry the payload in ``data``; responses with a
    4xx/5xx status carry a message string in ``error``.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = (renderer_context or {}).get('response')

        if response is not None and response.status_code == 204:
            return b''

        if response is not None and response.status_code >= 400:
            envelope = {'data': None, 'error': error_message(data)}
        else:
            envelope = {'data': data, 'error': None}

        return super().render(envelope, accepted_media_type, renderer_context)
