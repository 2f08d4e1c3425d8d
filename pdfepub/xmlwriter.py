"""A small tree-building XML writer."""

from __future__ import annotations


class XmlTag:
    """An XML element with attributes and child nodes."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.children: list[XmlTag] = []
        self.attributes: dict[str, str] = {}
        self.parent: XmlTag | None = None

    def to_xml(self) -> str:
        """Render this element and its children."""
        attrs = "".join(f' {key}="{value}"' for key, value in sorted(self.attributes.items()))
        body = "".join(child.to_xml() for child in self.children)
        return f"<{self.name}{attrs}>{body}</{self.name}>\n"

    def add_tag(self, tag: XmlTag) -> None:
        """Append a child node."""
        tag.parent = self
        self.children.append(tag)

    def add_attribute(self, key: str, value: str) -> None:
        """Set an attribute, replacing any earlier value."""
        self.attributes[key] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Element(XmlTag):
    """A text node; its name holds the text."""

    def to_xml(self) -> str:
        """Render the text with markup characters escaped."""
        return (
            self.name.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
        )


class XmlDocument:
    """Builds an XML document tag by tag."""

    def __init__(self) -> None:
        self.root: XmlTag | None = None
        self._last_tag: XmlTag | None = None
        self.version = ""
        self.charset = ""
        self.doctype_name = ""
        self.public_id = ""
        self.sys_id = ""

    def start_document(self, version: str, charset: str) -> None:
        """Set the version and encoding of the XML declaration."""
        self.version = version
        self.charset = charset

    def set_doctype(self, name: str, public_id: str, sys_id: str) -> None:
        """Set the document type declaration."""
        self.doctype_name = name
        self.public_id = public_id
        self.sys_id = sys_id

    def add_attribute(self, key: str, value: str) -> None:
        """Add an attribute to the open tag, if any."""
        if self._last_tag is not None:
            self._last_tag.add_attribute(key, value)

    def add_element(self, value: str) -> None:
        """Add text to the open tag, if any."""
        if self._last_tag is not None:
            self._last_tag.add_tag(Element(value))

    def start_tag(self, tag_name: str) -> None:
        """Open a new tag inside the open one."""
        tag = XmlTag(tag_name)
        if self.root is None:
            self.root = tag
        if self._last_tag is not None:
            self._last_tag.add_tag(tag)
        self._last_tag = tag

    def end_tag(self) -> None:
        """Close the open tag."""
        if self._last_tag is not None:
            self._last_tag = self._last_tag.parent

    def end_document(self) -> None:
        """Finish the document, closing any tags still open."""
        self._last_tag = None

    def content(self) -> str:
        """Render the whole document."""
        parts = [f'<?xml version="{self.version}" encoding="{self.charset}"?>\n']
        if self.doctype_name:
            doctype = f"<!DOCTYPE {self.doctype_name}"
            if self.public_id:
                doctype += f' PUBLIC "{self.public_id}"'
            if self.sys_id:
                doctype += f' "{self.sys_id}"'
            parts.append(doctype + ">\n")
        if self.root is not None:
            parts.append(self.root.to_xml())
        return "".join(parts)