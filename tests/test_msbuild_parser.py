"""Tests for MSBuildProjectParser."""

from __future__ import annotations

from pathlib import Path

import pytest

from dupref.exceptions import ProjectParseError
from dupref.parsers import MSBuildProjectParser, ProjectParser

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"


@pytest.fixture
def parser():
    return MSBuildProjectParser()


def _write(tmp_path: Path, body: str, name: str = "App.csproj", ns: bool = True) -> Path:
    xmlns = f' xmlns="{MSBUILD_NS}"' if ns else ""
    f = tmp_path / name
    f.write_text(f'<?xml version="1.0" encoding="utf-8"?>\n<Project{xmlns}>\n{body}\n</Project>\n')
    return f


class TestItems:
    def test_satisfies_protocol(self, parser):
        assert isinstance(parser, ProjectParser)

    def test_namespaced_project(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <ItemGroup>
    <Reference Include="System" />
    <Reference Include="Newtonsoft.Json, Version=9.0.0.0, Culture=neutral">
      <HintPath>..\\packages\\Newtonsoft.Json.9.0.1\\lib\\net45\\Newtonsoft.Json.dll</HintPath>
    </Reference>
  </ItemGroup>
  <ItemGroup>
    <Compile Include="Program.cs" />
    <ProjectReference Include="..\\Lib\\Lib.csproj" />
  </ItemGroup>""",
        )
        items = parser.parse(f, {})
        assert [(i.item_type, i.raw_identity) for i in items] == [
            ("Reference", "System"),
            ("Reference", "Newtonsoft.Json, Version=9.0.0.0, Culture=neutral"),
            ("Compile", "Program.cs"),
            ("ProjectReference", "..\\Lib\\Lib.csproj"),
        ]

    def test_sdk_style_project(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <ItemGroup>
    <PackageReference Include="Serilog" Version="3.1.1" />
    <Reference Include="System.Web" />
  </ItemGroup>""",
            ns=False,
        )
        items = parser.parse(f, {})
        assert [(i.item_type, i.raw_identity) for i in items] == [
            ("PackageReference", "Serilog"),
            ("Reference", "System.Web"),
        ]

    def test_conditional_item_groups_are_included(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <ItemGroup Condition="'$(Configuration)' == 'Debug'">
    <Reference Include="Debug.Helpers" />
  </ItemGroup>""",
        )
        items = parser.parse(f, {"Configuration": "Release"})
        assert [i.raw_identity for i in items] == ["Debug.Helpers"]

    def test_items_without_include_are_skipped(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <ItemGroup>
    <Compile Remove="obj/**" />
    <None Update="appsettings.json" />
    <Reference Include="System" />
  </ItemGroup>""",
        )
        assert [i.raw_identity for i in parser.parse(f, {})] == ["System"]

    def test_no_item_groups(self, parser, tmp_path):
        f = _write(tmp_path, "<PropertyGroup><OutputType>Exe</OutputType></PropertyGroup>")
        assert parser.parse(f, {}) == []


class TestPropertyExpansion:
    BODY = """
  <PropertyGroup>
    <LibName>Contoso.Core</LibName>
  </PropertyGroup>
  <ItemGroup>
    <Reference Include="$(LibName)" />
    <Reference Include="$(libname).Extras" />
  </ItemGroup>"""

    def test_project_property(self, parser, tmp_path):
        f = _write(tmp_path, self.BODY)
        assert [i.raw_identity for i in parser.parse(f, {})] == [
            "Contoso.Core",
            "Contoso.Core.Extras",
        ]

    def test_global_property_overrides_project(self, parser, tmp_path):
        f = _write(tmp_path, self.BODY)
        items = parser.parse(f, {"LibName": "Fabrikam"})
        assert [i.raw_identity for i in items] == ["Fabrikam", "Fabrikam.Extras"]

    def test_unknown_property_expands_to_empty(self, parser, tmp_path):
        f = _write(tmp_path, '<ItemGroup><Reference Include="$(Prefix)Core" /></ItemGroup>')
        assert [i.raw_identity for i in parser.parse(f, {})] == ["Core"]

    def test_reserved_properties(self, parser, tmp_path):
        f = _write(
            tmp_path,
            '<ItemGroup><Reference Include="$(MSBuildProjectName).Generated" /></ItemGroup>',
            name="Billing.csproj",
        )
        assert [i.raw_identity for i in parser.parse(f, {})] == ["Billing.Generated"]

    def test_conditional_property_is_ignored(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <PropertyGroup Condition="'$(Configuration)' == 'Debug'">
    <LibName>Debug.Lib</LibName>
  </PropertyGroup>
  <ItemGroup><Reference Include="x$(LibName)" /></ItemGroup>""",
        )
        assert [i.raw_identity for i in parser.parse(f, {})] == ["x"]


class TestImports:
    def test_missing_import_fails(self, parser, tmp_path):
        f = _write(tmp_path, '<Import Project="..\\build\\Common.props" />')
        with pytest.raises(ProjectParseError) as exc_info:
            parser.parse(f, {})
        assert "imported project not found" in str(exc_info.value)

    def test_existing_import(self, parser, tmp_path):
        (tmp_path / "Common.props").write_text("<Project />")
        f = _write(
            tmp_path,
            '<Import Project="$(MSBuildThisFileDirectory)Common.props" />'
            '<ItemGroup><Reference Include="System" /></ItemGroup>',
        )
        assert len(parser.parse(f, {})) == 1

    def test_conditional_import_not_checked(self, parser, tmp_path):
        f = _write(
            tmp_path,
            '<Import Project="missing.props" Condition="Exists(\'missing.props\')" />',
        )
        assert parser.parse(f, {}) == []

    def test_unresolved_property_import_not_checked(self, parser, tmp_path):
        f = _write(
            tmp_path,
            '<Import Project="$(MSBuildToolsPath)\\Microsoft.CSharp.targets" />',
        )
        assert parser.parse(f, {}) == []

    def test_wildcard_import_not_checked(self, parser, tmp_path):
        f = _write(tmp_path, '<Import Project="build\\*.targets" />')
        assert parser.parse(f, {}) == []


class TestParseErrors:
    def test_malformed_xml(self, parser, tmp_path):
        f = tmp_path / "Broken.csproj"
        f.write_text("<Project><ItemGroup>")
        with pytest.raises(ProjectParseError) as exc_info:
            parser.parse(f, {})
        assert exc_info.value.file_path == str(f)
        assert "invalid XML" in exc_info.value.reason

    def test_wrong_root_element(self, parser, tmp_path):
        f = tmp_path / "Other.csproj"
        f.write_text("<configuration />")
        with pytest.raises(ProjectParseError, match="expected <Project>"):
            parser.parse(f, {})

    def test_missing_file(self, parser, tmp_path):
        with pytest.raises(ProjectParseError):
            parser.parse(tmp_path / "Gone.csproj", {})

    def test_empty_file(self, parser, tmp_path):
        f = tmp_path / "Empty.csproj"
        f.write_text("")
        with pytest.raises(ProjectParseError):
            parser.parse(f, {})


class TestEmptyInclude:
    def test_include_expanding_to_nothing_is_dropped(self, parser, tmp_path):
        f = _write(tmp_path, '<ItemGroup><Reference Include="$(Missing)" /><Reference Include="A" /></ItemGroup>')
        assert [i.raw_identity for i in parser.parse(f, {})] == ["A"]


class TestNestedItemGroups:
    def test_choose_branches_are_included(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <Choose>
    <When Condition="'$(Platform)' == 'x64'">
      <ItemGroup><Reference Include="Native.x64" /></ItemGroup>
    </When>
    <Otherwise>
      <Choose>
        <When Condition="'$(Platform)' == 'x86'">
          <ItemGroup><Reference Include="Native.x86" /></ItemGroup>
        </When>
      </Choose>
    </Otherwise>
  </Choose>""",
        )
        assert [i.raw_identity for i in parser.parse(f, {})] == ["Native.x64", "Native.x86"]

    def test_target_item_groups_are_excluded(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <ItemGroup><Reference Include="System" /></ItemGroup>
  <Target Name="BeforeBuild">
    <ItemGroup><Reference Include="System" /></ItemGroup>
  </Target>""",
        )
        assert [i.raw_identity for i in parser.parse(f, {})] == ["System"]


class TestGlobalPropertiesInProjectProperties:
    def test_global_property_visible_while_evaluating(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <PropertyGroup><LibName>Lib.$(Configuration)</LibName></PropertyGroup>
  <ItemGroup>
    <Reference Include="$(LibName)" />
    <Reference Include="Lib.Debug" />
  </ItemGroup>""",
        )
        items = parser.parse(f, {"Configuration": "Debug"})
        assert [i.raw_identity for i in items] == ["Lib.Debug", "Lib.Debug"]

    def test_project_cannot_redefine_global_property(self, parser, tmp_path):
        f = _write(
            tmp_path,
            """
  <PropertyGroup><Configuration>Release</Configuration></PropertyGroup>
  <ItemGroup><Reference Include="Lib.$(Configuration)" /></ItemGroup>""",
        )
        assert [i.raw_identity for i in parser.parse(f, {"configuration": "Debug"})] == ["Lib.Debug"]


class TestEncoding:
    def test_unknown_encoding_declaration(self, parser, tmp_path):
        f = tmp_path / "Odd.csproj"
        f.write_text('<?xml version="1.0" encoding="bogus"?><Project />')
        with pytest.raises(ProjectParseError):
            parser.parse(f, {})
