"""
Tests for the offline extractors: signatures, logic signals, design tokens.
"""

import json

from primevue_mcp.pipeline.logic import (
    extract_logic,
    extract_logic_from_source,
    read_logic_source,
    run_logic_extraction,
)
from primevue_mcp.pipeline.signatures import (
    SignatureExtractor,
    find_definition_file,
    get_pascal_case_name,
    run_signature_extraction,
)
from primevue_mcp.pipeline.tokens import (
    extract_tokens,
    extract_tokens_from_source,
    run_token_extraction,
    token_key,
)
from primevue_mcp.pipeline.walker import walk_script_files


# =============================================================================
# Signature Extractor
# =============================================================================


class TestPascalCaseNames:
    """Test directory name to type prefix conversion."""

    def test_mapped_multi_word_names(self):
        assert get_pascal_case_name("inputtext") == "InputText"
        assert get_pascal_case_name("datatable") == "DataTable"
        assert get_pascal_case_name("toggleswitch") == "ToggleSwitch"

    def test_single_word_capitalized(self):
        assert get_pascal_case_name("button") == "Button"
        assert get_pascal_case_name("dialog") == "Dialog"


class TestSignatureExtraction:
    """Test library-wide signature extraction."""

    def test_definition_file_lookup_order(self, library_dir):
        assert find_definition_file(library_dir / "button").name == "index.d.ts"
        assert find_definition_file(library_dir / "inputtext").name == "inputtext.d.ts"
        assert find_definition_file(library_dir / "helpers") is None

    def test_extract_all(self, library_dir):
        api = SignatureExtractor().extract_all(library_dir)

        assert list(api.keys()) == ["button", "inputtext"]
        assert api["button"]["props"] == {
            "label": "string | undefined",
            "icon": "string | undefined",
            "loading": "boolean | undefined",
        }
        assert api["button"]["slots"] == {
            "loadingicon": "() => VNode[]",
            "icon": "(scope: { size: string }) => VNode[]",
        }
        assert api["button"]["emits"] == {}

    def test_alias_emits_override_interface(self, library_dir):
        api = SignatureExtractor().extract_all(library_dir)
        assert api["inputtext"]["emits"] == {
            "update:modelValue": "[string | undefined]",
            "value-change": "(value: string | undefined) => void",
        }
        assert api["inputtext"]["props"]["size"] == "'small' | 'large' | undefined"

    def test_missing_library_is_empty(self, temp_dir):
        assert SignatureExtractor().extract_all(temp_dir / "missing") == {}

    def test_run_writes_api_json(self, library_dir, temp_dir):
        output = temp_dir / "data" / "api.json"
        run_signature_extraction(library_dir, output)
        written = json.loads(output.read_text())
        assert set(written) == {"button", "inputtext"}


# =============================================================================
# Logic Signal Extractor
# =============================================================================


class TestLogicFromSource:
    """Test the regex heuristics on raw source text."""

    def test_categories_in_first_seen_order(self):
        source = """
import { ref, computed, watch } from 'vue';
const a = useForm(); const b = useStyle(); const c = useForm();
watch(a, () => {});
"""
        logic = extract_logic_from_source(source)
        assert logic["composables"] == ["useForm", "useStyle"]
        assert logic["vueImports"] == ["ref", "computed", "watch"]

    def test_methods_exclude_setup_and_render(self):
        source = "setup() { return 1; } render() { return h(); } toggle(e) { this.open = !this.open; }"
        assert extract_logic_from_source(source)["methods"] == ["toggle"]

    def test_emits_deduplicated(self):
        source = """
this.$emit('update:modelValue', v); emit("change", e);
this.$emit('update:modelValue', w); emit(`blur`);
"""
        assert extract_logic_from_source(source)["emits"] == ["update:modelValue", "change", "blur"]

    def test_reactivity_matches_whole_words_only(self):
        logic = extract_logic_from_source("const reference = refresh(); const x = watcher;")
        assert "vueImports" not in logic

    def test_empty_categories_omitted(self):
        assert extract_logic_from_source("const x = 1;") == {}


class TestLogicExtraction:
    """Test library-wide logic extraction."""

    def test_extract_logic(self, library_dir):
        logic = extract_logic(library_dir)

        assert logic["button"] == {
            "composables": ["useStyle"],
            "vueImports": ["computed", "ref"],
            "methods": ["onClick", "onBlur"],
            "emits": ["click", "blur"],
        }
        # index.mjs fallback
        assert logic["inputtext"] == {
            "methods": ["onInput"],
            "emits": ["update:modelValue"],
        }
        assert "helpers" not in logic

    def test_empty_vue_falls_back_to_module(self, temp_dir):
        component = temp_dir / "lib" / "chip"
        component.mkdir(parents=True)
        (component / "chip.vue").write_text("")
        (component / "index.mjs").write_text("function onRemove(event) { this.$emit('remove', event); }")

        assert read_logic_source(component).startswith("function onRemove")
        assert extract_logic(temp_dir / "lib") == {
            "chip": {"methods": ["onRemove"], "emits": ["remove"]},
        }

    def test_no_readable_source(self, temp_dir):
        component = temp_dir / "lib" / "chip"
        component.mkdir(parents=True)
        (component / "chip.vue").write_text("")

        assert read_logic_source(component) is None
        assert extract_logic(temp_dir / "lib") == {}

    def test_run_writes_logic_json(self, library_dir, temp_dir):
        output = temp_dir / "logic.json"
        run_logic_extraction(library_dir, output)
        assert "button" in json.loads(output.read_text())


# =============================================================================
# Token Extractor
# =============================================================================


class TestTokenKeys:
    """Test token path to key conversion."""

    def test_token_key(self):
        assert token_key("button.border.radius") == "--p-button-border-radius"
        assert token_key("primary") == "--p-primary"


class TestTokensFromSource:
    """Test dt() call matching."""

    def test_all_quote_styles(self):
        source = """css`border-radius: ${dt('button.border.radius')}; color: ${dt("primary.color")}; gap: ${dt(`form.gap`)};`"""
        assert extract_tokens_from_source(source) == {
            "--p-button-border-radius": "dt('button.border.radius')",
            "--p-primary-color": 'dt("primary.color")',
            "--p-form-gap": "dt(`form.gap`)",
        }

    def test_repeated_path_yields_single_key(self):
        source = "dt('button.border.radius') + dt('button.border.radius')"
        assert extract_tokens_from_source(source) == {
            "--p-button-border-radius": "dt('button.border.radius')",
        }

    def test_non_dt_calls_ignored(self):
        assert extract_tokens_from_source("adt('x.y') + getdt('a.b')") == {}


class TestScriptWalk:
    """Test deterministic theme traversal."""

    def test_files_before_subdirectories_in_name_order(self, temp_dir):
        (temp_dir / "b").mkdir()
        (temp_dir / "a").mkdir()
        (temp_dir / "z.js").write_text("")
        (temp_dir / "a" / "index.mjs").write_text("")
        (temp_dir / "b" / "index.JS").write_text("")
        (temp_dir / "b" / "index.js.map").write_text("")
        (temp_dir / "b" / "index.d.ts").write_text("")

        names = [p.relative_to(temp_dir).as_posix() for p in walk_script_files(temp_dir)]
        assert names == ["z.js", "a/index.mjs", "b/index.JS"]

    def test_missing_root_yields_nothing(self, temp_dir):
        assert list(walk_script_files(temp_dir / "missing")) == []


class TestTokenExtraction:
    """Test token extraction across theme roots."""

    def test_last_seen_quoting_wins(self, temp_dir):
        styles = temp_dir / "styles"
        styled = temp_dir / "styled"
        styles.mkdir()
        styled.mkdir()
        (styles / "button.mjs").write_text("x = dt('button.border.radius');")
        (styled / "index.mjs").write_text('y = dt("button.border.radius");')

        tokens = extract_tokens([styles, styled])
        assert tokens == {"--p-button-border-radius": 'dt("button.border.radius")'}

    def test_missing_root_skipped(self, temp_dir):
        styles = temp_dir / "styles"
        styles.mkdir()
        (styles / "a.js").write_text("dt('primary.color')")

        tokens = extract_tokens([temp_dir / "missing", styles])
        assert tokens == {"--p-primary-color": "dt('primary.color')"}

    def test_run_writes_tokens_json(self, temp_dir):
        styles = temp_dir / "styles"
        styles.mkdir()
        (styles / "a.js").write_text("dt('primary.color')")
        output = temp_dir / "data" / "tokens.json"

        run_token_extraction([styles], output)
        assert json.loads(output.read_text()) == {"--p-primary-color": "dt('primary.color')"}
