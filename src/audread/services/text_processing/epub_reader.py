"""Plain text extraction from EPUB archives."""

import io
import logging
import xml.etree.ElementTree as ET
import zipfile
from pathlib import PurePosixPath
from typing import List

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

HTML_EXTS = (".xhtml", ".html", ".htm")
CONTAINER_PATH = "META-INF/container.xml"
CONTAINER_NS = {"c": "urn:oasis:names:tc:opendocument:xmlns:container"}


def _find_opf_path(zf: zipfile.ZipFile) -> str:
    # META-INF/container.xml -> rootfiles/rootfile@full-path
    if CONTAINER_PATH in zf.namelist():
        try:
            root = ET.fromstring(zf.read(CONTAINER_PATH))
        except ET.ParseError as e:
            logger.warning("Unreadable %s: %s", CONTAINER_PATH, e)
        else:
            for rf in root.findall(".//c:rootfile", CONTAINER_NS):
                full = rf.attrib.get("full-path")
                if full:
                    return full
    for name in zf.namelist():
        if name.lower().endswith(".opf"):
            return name
    return ""


def spine_items(zf: zipfile.ZipFile) -> List[str]:
    """Return the archive paths of the content documents in reading order.

    Falls back to every HTML entry in archive order when the package
    document is missing or has an empty spine.
    """
    items: List[str] = []
    opf_path = _find_opf_path(zf)
    if opf_path and opf_path in zf.namelist():
        try:
            root = ET.fromstring(zf.read(opf_path))
        except ET.ParseError as e:
            logger.warning("Unreadable package document %s: %s", opf_path, e)
        else:
            nsmap = {"opf": root.tag.split("}")[0].strip("{")} if root.tag.startswith("{") else {"opf": ""}
            manifest = {}
            for item in root.findall(".//opf:manifest/opf:item", nsmap):
                if item.attrib.get("id") and item.attrib.get("href"):
                    manifest[item.attrib["id"]] = item.attrib["href"]
            base = PurePosixPath(opf_path).parent
            for ref in root.findall(".//opf:spine/opf:itemref", nsmap):
                href = manifest.get(ref.attrib.get("idref", ""))
                if href:
                    items.append((base / href).as_posix() if str(base) != "." else href)

    names = set(zf.namelist())
    items = [item for item in items if item in names]
    if not items:
        items = [name for name in zf.namelist() if name.lower().endswith(HTML_EXTS)]
    return items


def html_to_text(html: bytes) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(["script", "style", "title"]):
        tag.decompose()
    return soup.get_text(separator=" ")


def epub_to_text(raw: bytes) -> str:
    """Concatenate the text of every content document in spine order.

    Raises:
        zipfile.BadZipFile: If ``raw`` is not a zip archive.
    """
    with zipfile.ZipFile(io.BytesIO(raw)) as zf:
        chapters = [html_to_text(zf.read(name)) for name in spine_items(zf)]
    return " ".join(" ".join(chapters).split())
