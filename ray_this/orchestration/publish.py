import logging
from typing import Optional

from ..config import PublishSettings
from ..editor import EditorDocument, Presenter, TextSource, UrlOpener
from ..exception_handler import EmptySelectionError, NoActiveEditorError, PreconditionError
from ..formatting import CodeFormatter, format_snippet
from ..language import LanguageTable, load_language_table
from ..snippet import Snippet, SnippetOptions
from ..utils import build_ray_url, encode_code


logger = logging.getLogger("ray_this")

UNTITLED = "Untitled"


def derive_title(file_name: Optional[str]) -> str:
    """Return the last path segment of ``file_name``, or ``"Untitled"``."""
    if not file_name:
        return UNTITLED
    segment = file_name.replace("\\", "/").split("/")[-1]
    return segment or UNTITLED


def create_snippet(
    text: str,
    file_name: Optional[str] = None,
    *,
    formatter: Optional[CodeFormatter] = None,
    table: Optional[LanguageTable] = None,
    settings: Optional[PublishSettings] = None,
    options: Optional[SnippetOptions] = None,
) -> Snippet:
    """Format, encode and build the ray.so URL for one selection.

    ``options`` are applied on top of the configured display options; the
    ``code`` and ``language`` parameters always come from the selection.

    Raises:
        EmptySelectionError: If ``text`` is empty.
    """
    if not text:
        raise EmptySelectionError()

    settings = settings or PublishSettings()
    if table is None:
        table = load_language_table(settings.filetypes_path)

    content = format_snippet(text, formatter)
    encoded = encode_code(content)
    language = table.resolve(file_name)

    params = settings.display_options(derive_title(file_name))
    if options:
        params.update(options)

    url = build_ray_url(encoded, language, params)
    logger.info("Built ray.so URL for %s (%s)", file_name or UNTITLED, language)

    return Snippet(
        title=params.get("title", UNTITLED),
        language=language,
        code=content,
        encoded=encoded,
        url=url,
        path=file_name,
    )


class SnippetPublisher:
    """Publish the active selection: build its URL, announce it, open it."""

    def __init__(
        self,
        *,
        source: TextSource,
        opener: UrlOpener,
        presenter: Presenter,
        formatter: Optional[CodeFormatter] = None,
        table: Optional[LanguageTable] = None,
        settings: Optional[PublishSettings] = None,
        options: Optional[SnippetOptions] = None,
    ) -> None:
        self.source = source
        self.opener = opener
        self.presenter = presenter
        self.formatter = formatter
        self.settings = settings or PublishSettings()
        self.table = table
        self.options = dict(options or {})

    def build(self, document: EditorDocument) -> Snippet:
        return create_snippet(
            document.selected_text(),
            document.file_name,
            formatter=self.formatter,
            table=self.table,
            settings=self.settings,
            options=self.options,
        )

    def publish(self) -> Optional[Snippet]:
        """Run the command; precondition failures are shown, not raised."""
        try:
            document = self.source.active_document()
            if document is None:
                raise NoActiveEditorError()
            snippet = self.build(document)
        except PreconditionError as exc:
            self.presenter.show_error(str(exc))
            return None

        self.presenter.show_info(f"[Screenshot url]({snippet.url})")
        self.opener.open(snippet.url)
        return snippet


def publish_selected_snippet(
    source: TextSource,
    opener: UrlOpener,
    presenter: Presenter,
    *,
    formatter: Optional[CodeFormatter] = None,
    table: Optional[LanguageTable] = None,
    settings: Optional[PublishSettings] = None,
    options: Optional[SnippetOptions] = None,
) -> Optional[Snippet]:
    """Convenience helper to build a publisher and run it once."""
    publisher = SnippetPublisher(
        source=source,
        opener=opener,
        presenter=presenter,
        formatter=formatter,
        table=table,
        settings=settings,
        options=options,
    )
    return publisher.publish()
