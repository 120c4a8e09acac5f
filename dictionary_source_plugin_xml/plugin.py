import logging
from typing import List, TextIO, Union

from lxml import etree

from letterman_api.exceptions import DictionaryFormatError
from letterman_api.plugins import DictionarySourcePlugin
from letterman_api.types import ExpansionMode
from letterman_core.services.expander_service import DictionaryExpander

logger = logging.getLogger(__name__)


class XmlDictionarySourcePlugin(DictionarySourcePlugin):
    """
    DictionarySourcePlugin for XML dictionaries:

        <dictionary mode="C" count="3">
            <word>c[ao]t</word>
            <!-- comments are dropped -->
            <word>dog</word>
        </dictionary>
    """

    def __init__(self):
        self._expander = DictionaryExpander()

    def get_plugin_name(self) -> str:
        return "XML Dictionary"

    def parse(self, stream: TextIO) -> List[str]:
        return self._parse_document(stream.read())

    def parse_file(self, file_path: str) -> List[str]:
        with open(file_path, "rb") as fh:
            return self._parse_document(fh.read())

    def _parse_document(self, data: Union[str, bytes]) -> List[str]:
        if isinstance(data, str):
            data = data.encode("utf-8")

        parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as exc:
            raise DictionaryFormatError(f"Invalid dictionary: {exc}")

        if etree.QName(root).localname != "dictionary":
            raise DictionaryFormatError("Invalid dictionary: root element must be <dictionary>")

        try:
            mode = ExpansionMode.from_marker(root.get("mode", "").strip())
        except ValueError:
            raise DictionaryFormatError("Invalid dictionary")

        words: List[str] = []
        for child in root:
            if not isinstance(child.tag, str) or etree.QName(child).localname != "word":
                continue
            parts = (child.text or "").split()
            if parts:
                words.extend(self._expander.expand(parts[0], mode))

        logger.debug("Read %d words (count hint %s, mode %s).",
                     len(words), root.get("count"), mode.value)
        return words
