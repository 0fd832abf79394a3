"""
Pytest fixtures for PrimeVue MCP tests.
"""

import json
import sys
import tempfile
from pathlib import Path
from typing import Any, Generator

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_dataset() -> dict[str, Any]:
    """A small combined dataset covering every record shape."""
    return {
        "button": {
            "title": "Button",
            "description": "Button is an extension to standard button element. Click to toggle.",
            "examples": ['<Button label="Submit" />'],
            "props": {
                "label": "string | undefined",
                "icon": "string | undefined",
                "severity": "HintedString<'secondary' | 'success'> | undefined",
            },
            "emits": {},
            "slots": {"default": "() => VNode[]", "icon": "(scope: { class: any }) => VNode[]"},
            "logic": {"composables": ["useStyle"], "vueImports": ["computed"]},
        },
        "datatable": {
            "title": "DataTable",
            "description": "DataTable displays data in tabular format.",
            "examples": [],
            "props": {"value": "any[] | undefined", "paginator": "boolean | undefined"},
            "emits": {"page": "(event: DataTablePageEvent) => void"},
        },
        "inputtext": {
            "title": "InputText",
            "props": {"modelValue": "string | undefined"},
        },
        "_tokens": {
            "--p-button-border-radius": "dt('button.border.radius')",
            "--p-primary-color": "dt('primary.color')",
            "--p-datatable-header-cell-padding": "dt('datatable.header.cell.padding')",
        },
    }


@pytest.fixture
def combined_file(temp_dir: Path, sample_dataset: dict[str, Any]) -> Path:
    """Write the sample dataset as combined.json."""
    path = temp_dir / "combined.json"
    path.write_text(json.dumps(sample_dataset, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def catalog(combined_file: Path, fake_clock: FakeClock):
    """Install a process-wide catalog over the sample dataset."""
    from primevue_mcp.catalog import configure_catalog, reset_catalog

    service = configure_catalog(path=combined_file, ttl=300, clock=fake_clock)
    yield service
    reset_catalog()


@pytest.fixture
def library_dir(temp_dir: Path) -> Path:
    """A miniature component library with declaration and logic sources."""
    root = temp_dir / "primevue"

    button = root / "button"
    button.mkdir(parents=True)
    (button / "index.d.ts").write_text('''
import { VNode } from 'vue';
import { EmitFn } from '../ts-helpers';

export interface ButtonProps {
    label?: string | undefined;
    icon?: string | undefined;
    loading?: boolean | undefined;
}

export interface ButtonSlots {
    loadingicon(): VNode[];
    icon(scope: { size: string }): VNode[];
}

export interface ButtonEmitsOptions {}

export declare type ButtonEmits = EmitFn<ButtonEmitsOptions>;
''')
    (button / "button.vue").write_text('''
<script>
import { computed, ref } from 'vue';
import { useStyle } from '@primevue/core/usestyle';
export default {
    name: 'Button',
    setup() { return {}; },
    methods: {
        onClick(event) { this.$emit('click', event); },
        onBlur(event) { this.$emit('blur', event); }
    }
};
</script>
''')

    inputtext = root / "inputtext"
    inputtext.mkdir()
    (inputtext / "inputtext.d.ts").write_text('''
export interface InputTextProps {
    modelValue?: string | undefined;
    size?: 'small' | 'large' | undefined;
}

export interface InputTextEmitsOptions {
    'update:modelValue'(value: string | undefined): void;
    'value-change'(value: string | undefined): void;
}

export declare type InputTextEmits = EmitFn<{
    'update:modelValue': [string | undefined];
}>;
''')
    (inputtext / "index.mjs").write_text(
        "function onInput(event){ this.$emit('update:modelValue', event.target.value); }\n"
    )

    # No declaration file: skipped by the signature extractor
    (root / "helpers").mkdir()
    (root / "helpers" / "README.md").write_text("not a component")

    return root
