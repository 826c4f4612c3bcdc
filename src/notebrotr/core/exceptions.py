"""notebrotr exception hierarchy.

Provides typed exceptions for the failure categories of the render
pipeline, distinguishing failures that degrade to literal text from the
ones that fail a whole render call.

Exception hierarchy:

```text
NoteBrotrError (base -- never raised directly)
├── ConfigurationError   -- config validation, bad YAML
├── DecodeError          -- malformed identity code
│   └── UnsupportedEntityError -- well-formed code of a non-pubkey type
├── LoaderError          -- profile resolution / network failure
└── RenderError          -- markdown engine failure (fatal for the call)
```

See Also:
    [decode_identity_code()][notebrotr.nips.nip19.decode_identity_code]:
        Raises [DecodeError][notebrotr.core.exceptions.DecodeError].
    [get_profile()][notebrotr.render.profiles.get_profile]: Absorbs
        [DecodeError][notebrotr.core.exceptions.DecodeError] and
        [LoaderError][notebrotr.core.exceptions.LoaderError].
    [MarkdownEngine][notebrotr.render.markdown.MarkdownEngine]: Raises
        [RenderError][notebrotr.core.exceptions.RenderError].
"""

from __future__ import annotations


class NoteBrotrError(Exception):
    """Base exception for all notebrotr errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(NoteBrotrError):
    """Invalid or missing configuration (YAML syntax, schema violations).

    See Also:
        [load_yaml()][notebrotr.core.yaml.load_yaml]: Raises this on
            unparsable YAML.
        [RenderConfig][notebrotr.render.configs.RenderConfig]: Raises this
            on schema violations in ``from_dict()`` / ``from_yaml()``.
    """


class DecodeError(NoteBrotrError):
    """Identity code is malformed or names an unsupported entity type.

    Recovered locally by the identity decoder: the reference renders as its
    original text.

    Attributes:
        code: The identity code that failed to decode.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class LoaderError(NoteBrotrError):
    """Profile resolution failed (network failure, bad relay data).

    Recovered locally by the identity decoder, never retried.
    """


class RenderError(NoteBrotrError):
    """The markdown engine failed to convert the processed content.

    Not recovered: propagates to the caller of
    [Pipeline.process_all()][notebrotr.render.pipeline.Pipeline.process_all].
    """


class UnsupportedEntityError(DecodeError):
    """Identity code decoded to an entity that carries no public key.

    Raised for event pointers (``note1``, ``nevent1``) and other NIP-19
    types that cannot be resolved to a profile.

    Attributes:
        entity_type: Human-readable name of the decoded entity type.
    """

    def __init__(self, code: str, entity_type: str) -> None:
        super().__init__(f"Unsupported entity type {entity_type}: expected npub or nprofile", code)
        self.entity_type = entity_type
