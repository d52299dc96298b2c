"""Parser for MSBuild project files (.csproj, .vbproj, ...)."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Mapping

from dupref.exceptions import ProjectParseError
from dupref.models import DeclaredItem

_PROP_RE = re.compile(r"\$\(([A-Za-z_][\w.-]*)\)")


def _local(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _expand(value: str, props: Mapping[str, str]) -> str:
    """Replace $(Property) references; unknown properties expand to ''."""

    def _replace(m: re.Match) -> str:
        return props.get(m.group(1).lower(), "")

    return _PROP_RE.sub(_replace, value)


def _item_groups(parent: ET.Element) -> Iterator[ET.Element]:
    """Yield project-level item groups, descending into Choose/When/Otherwise.

    Item groups inside <Target> run at build time and are not project items.
    """
    for el in parent:
        tag = _local(el.tag)
        if tag == "ItemGroup":
            yield el
        elif tag in ("Choose", "When", "Otherwise"):
            yield from _item_groups(el)


def _unresolved(value: str, props: Mapping[str, str]) -> bool:
    return any(name.lower() not in props for name in _PROP_RE.findall(value))


class MSBuildProjectParser:
    """Read the items declared in a project file's ``<ItemGroup>`` elements.

    Items are taken from the project XML as written: conditional item groups
    and those nested in ``<Choose>`` branches are included, groups inside
    ``<Target>`` are not, ``Include`` values only get ``$(Property)`` expansion.
    *properties* act as global properties and override any value the project
    defines itself.
    """

    def parse(self, file_path: Path, properties: Mapping[str, str]) -> list[DeclaredItem]:
        file_path = Path(file_path)
        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise ProjectParseError(str(file_path), e.strerror or str(e)) from e

        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ProjectParseError(str(file_path), f"invalid XML: {e}") from e
        except (LookupError, ValueError) as e:
            # unknown or mismatched encoding declaration
            raise ProjectParseError(str(file_path), f"cannot decode: {e}") from e

        if _local(root.tag) != "Project":
            raise ProjectParseError(
                str(file_path), f"root element is <{_local(root.tag)}>, expected <Project>"
            )

        props = self._evaluate_properties(root, file_path, properties)
        self._check_imports(root, file_path, props)

        items: list[DeclaredItem] = []
        for group in _item_groups(root):
            for item_el in group:
                include = item_el.get("Include")
                if include is None:
                    continue
                identity = _expand(include, props)
                if not identity.strip():
                    continue  # evaluates to no item
                items.append(DeclaredItem(item_type=_local(item_el.tag), raw_identity=identity))
        return items

    @staticmethod
    def _evaluate_properties(
        root: ET.Element, file_path: Path, overrides: Mapping[str, str]
    ) -> dict[str, str]:
        """Build the property table (keys lower-cased, names are case-insensitive)."""
        directory = str(file_path.resolve().parent)
        props: dict[str, str] = {
            "msbuildprojectdirectory": directory,
            "msbuildthisfiledirectory": directory + "/",
            "msbuildprojectfile": file_path.name,
            "msbuildprojectname": file_path.stem,
            "msbuildprojectextension": file_path.suffix,
        }
        for key, value in overrides.items():
            props[key.lower()] = value
        global_keys = {key.lower() for key in overrides}

        for group in root:
            if _local(group.tag) != "PropertyGroup" or group.get("Condition"):
                continue
            for prop_el in group:
                if prop_el.get("Condition"):
                    continue
                name = _local(prop_el.tag).lower()
                if name in global_keys:
                    continue
                props[name] = _expand((prop_el.text or "").strip(), props)
        return props

    @staticmethod
    def _check_imports(root: ET.Element, file_path: Path, props: Mapping[str, str]) -> None:
        """Fail on unconditional imports that point at a missing file."""
        for el in root:
            if _local(el.tag) != "Import" or el.get("Condition"):
                continue
            target = el.get("Project")
            if not target or _unresolved(target, props):
                continue
            expanded = _expand(target, props)
            if "*" in expanded or "?" in expanded:
                continue
            path = Path(expanded.replace("\\", "/"))
            if not path.is_absolute():
                path = file_path.parent / path
            if not path.exists():
                raise ProjectParseError(
                    str(file_path), f"imported project not found: {target}"
                )
