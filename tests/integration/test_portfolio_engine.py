"""
Integration tests for PortfolioEngine.process_portfolio_data().

Runs raw content maps through normalization, template resolution, layout
augmentation, styling and props generation.
"""

import pytest

from folio import PortfolioEngine, create_engine
from folio.contexts.ingest.file_mapper import RepositoryFile, map_files_to_content
from folio.contexts.templating.defaults import COLOR_SCHEMES
from folio.contexts.templating.registries import TemplateRegistry


@pytest.fixture
def engine():
    return PortfolioEngine()


@pytest.mark.integration
def test_markdown_about_renders_html(engine):
    bundle = engine.process_portfolio_data(
        {"about": {"format": "markdown", "content": "# Hi\nHello"}}, "default"
    )
    content = bundle.component_props["about"]["content"]

    assert "<h1>" in content
    assert "Hello" in content
    assert bundle.component_props["about"]["frontmatter"] == {}


@pytest.mark.integration
def test_hero_layout_without_name(engine):
    bundle = engine.process_portfolio_data({"projects": [{"name": "P1"}]}, "modern")

    assert bundle.data["hero"]["title"] == "'s Portfolio"
    assert bundle.data["hero"]["callToAction"] == {"text": "View My Work", "link": "#projects"}
    assert len(bundle.component_props["projects"]["projects"]) == 1
    assert bundle.template.layout == "hero"


@pytest.mark.integration
def test_bad_json_passes_through(engine):
    bundle = engine.process_portfolio_data({"x": {"format": "json", "content": "{bad json"}})

    assert bundle.data["x"] == "{bad json"
    assert bundle.metadata.data_formats == ["json"]


@pytest.mark.integration
def test_unknown_template_uses_default(engine):
    bundle = engine.process_portfolio_data({"name": "Ada"}, "does-not-exist")

    assert bundle.template is engine.get_template("default")
    assert bundle.metadata.template_id == "default"
    assert list(bundle.component_props) == ["header", "about", "projects", "skills", "contact"]


@pytest.mark.integration
def test_classic_navigation(engine):
    bundle = engine.process_portfolio_data({"name": "Ada", "avatar": "ada.png"}, "classic")
    navigation = bundle.data["navigation"]

    assert navigation["brand"] == {"name": "Ada", "avatar": "ada.png"}
    assert [link["href"] for link in navigation["links"]] == [
        "#hero",
        "#about",
        "#projects",
        "#contact",
    ]
    assert bundle.component_props["navigation"]["data"] == navigation


@pytest.mark.integration
def test_minimal_layout_flags(engine):
    bundle = engine.process_portfolio_data({"projects": [{"name": "P1"}]}, "minimal")

    assert bundle.data["layout"] == {"centered": True, "maxWidth": "4xl"}
    assert bundle.component_props["projects"]["showTechnologies"] is False
    assert bundle.data["styling"]["colors"] == COLOR_SCHEMES["gray"]


@pytest.mark.integration
def test_color_override_wins(engine):
    override = {"primary": "#FF0000", "secondary": "#00FF00"}
    bundle = engine.process_portfolio_data({"theme": {"colors": override}}, "modern")

    assert bundle.data["styling"]["colors"] == override
    assert bundle.data["styling"]["customStyles"]["colors"] == override
    assert bundle.component_props["about"]["styling"]["colors"] == override


@pytest.mark.integration
def test_full_portfolio(engine):
    raw = {
        "name": "Ada Lovelace",
        "description": "Analyst and metaphysician",
        "about": {"format": "md", "content": "---\nrole: Analyst\n---\nI write **notes**."},
        "projects": {"format": "json", "content": '[{"name": "Engine"}, {"name": "Notes"}]'},
        "skills": {"format": "yaml", "content": "- mathematics\n- poetry\n"},
        "contact": {"format": "yml", "content": "email: ada@example.com\n"},
        "social": {"github": "ada"},
    }
    bundle = engine.process_portfolio_data(raw, "modern")
    props = bundle.component_props

    assert props["hero"]["name"] == "Ada Lovelace"
    assert props["hero"]["description"] == "Analyst and metaphysician"
    assert "<strong>notes</strong>" in props["about"]["content"]
    assert props["about"]["frontmatter"] == {"role": "Analyst"}
    assert [project["name"] for project in props["projects"]["projects"]] == ["Engine", "Notes"]
    assert props["skills"]["skills"] == ["mathematics", "poetry"]
    assert props["contact"]["contact"] == {"email": "ada@example.com"}
    assert props["contact"]["social"] == {"github": "ada"}
    assert props["contact"]["showForm"] is True
    assert bundle.data["hero"]["subtitle"] == "Analyst and metaphysician"
    assert sorted(bundle.metadata.data_formats) == ["json", "markdown", "yaml"]


@pytest.mark.integration
def test_depth_truncation_reported(engine):
    node = "leaf"
    for _ in range(30):
        node = {"format": "text", "content": node}

    bundle = engine.process_portfolio_data({"about": node})

    assert bundle.metadata.truncated_paths == ["about"]
    assert bundle.metadata.data_formats == ["text"]


@pytest.mark.integration
def test_root_keys_named_like_a_wrapper(engine):
    bundle = engine.process_portfolio_data({"format": "text", "content": "hi"})

    assert bundle.data["format"] == "text"
    assert bundle.data["content"] == "hi"
    assert bundle.data["layout"] == {"standard": True}
    assert bundle.metadata.data_formats == []

    bundle = engine.process_portfolio_data({"format": "json", "content": "[1, 2]"}, "modern")

    assert bundle.data["content"] == "[1, 2]"
    assert bundle.data["hero"]["title"] == "'s Portfolio"


@pytest.mark.integration
def test_deeply_nested_lists_do_not_raise(engine):
    node = "leaf"
    for _ in range(1200):
        node = [node]

    bundle = engine.process_portfolio_data({"projects": node, "name": "Ada"})

    assert len(bundle.metadata.truncated_paths) == 1
    assert bundle.metadata.truncated_paths[0].startswith("projects[0]")
    assert bundle.component_props["header"]["name"] == "Ada"


@pytest.mark.integration
def test_non_mapping_input_does_not_raise(engine):
    bundle = engine.process_portfolio_data(["not", "a", "mapping"])

    assert bundle.metadata.template_id == "default"
    assert bundle.component_props["projects"]["projects"] == []


@pytest.mark.integration
def test_deterministic_apart_from_timestamp(engine):
    raw = {"about": {"format": "markdown", "content": "# Hi"}, "projects": [{"name": "P1"}]}

    first = engine.process_portfolio_data(raw, "classic").to_dict()
    second = engine.process_portfolio_data(raw, "classic").to_dict()
    first["metadata"].pop("processedAt")
    second["metadata"].pop("processedAt")

    assert first == second


@pytest.mark.integration
def test_to_dict_contract(engine):
    payload = engine.process_portfolio_data({"name": "Ada"}, "modern").to_dict()

    assert set(payload) == {"template", "data", "componentProps", "metadata"}
    assert set(payload["metadata"]) == {"processedAt", "templateId", "dataFormats", "truncatedPaths"}
    assert payload["template"]["id"] == "modern"
    assert payload["template"]["styling"]["colorScheme"] == "blue-purple"


@pytest.mark.integration
def test_engines_have_separate_registries():
    first = create_engine()
    second = create_engine()
    first.register_template(
        "blog",
        {"name": "Blog", "layout": "standard", "sections": ["posts"], "components": {"posts": "Posts"}},
    )

    assert first.process_portfolio_data({}, "blog").metadata.template_id == "blog"
    assert second.process_portfolio_data({}, "blog").metadata.template_id == "default"


@pytest.mark.integration
def test_injected_registry_and_custom_section():
    registry = TemplateRegistry()
    registry.register(
        "blog",
        {"name": "Blog", "layout": "standard", "sections": ["posts"], "components": {"posts": "Posts"}},
    )
    engine = PortfolioEngine(registry=registry, max_depth=3)
    bundle = engine.process_portfolio_data({"posts": [{"title": "Hello"}]}, "blog")

    assert engine.registry is registry
    assert engine.max_depth == 3
    assert bundle.component_props["posts"] == {
        "data": [{"title": "Hello"}],
        "styling": bundle.data["styling"],
        "template": "blog",
    }


@pytest.mark.integration
def test_validate_template_through_engine(engine):
    result = engine.validate_template({"name": "Broken"})

    assert result.valid is False
    assert result.errors
    assert len(engine.list_templates()) >= 4


@pytest.mark.integration
def test_repository_files_end_to_end(engine):
    files = [
        RepositoryFile("portfolio.yaml", "name: Ada\ntitle: Analyst\n"),
        RepositoryFile("about.md", "---\nrole: Analyst\n---\nHello there"),
        RepositoryFile("projects.json", '{"projects": [{"name": "Engine"}]}'),
        RepositoryFile("skills.yml", "- mathematics\n"),
    ]
    bundle = engine.process_portfolio_data(map_files_to_content(files), "default")
    props = bundle.component_props

    assert props["header"]["name"] == "Ada"
    assert props["header"]["title"] == "Analyst"
    assert "Hello there" in props["about"]["content"]
    assert props["projects"]["projects"] == [{"name": "Engine"}]
    assert props["skills"]["skills"] == ["mathematics"]
    assert bundle.metadata.data_formats == ["markdown", "json", "yaml"]
