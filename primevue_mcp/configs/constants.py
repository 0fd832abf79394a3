"""
PrimeVue MCP Constants

Static configuration values that rarely change: library locations,
naming tables, cache lifetime and timeouts.
"""

# --- Service Identity ---

SERVICE_NAME = "PrimeVue MCP API"
SERVICE_DESCRIPTION = "Model Context Protocol server for PrimeVue components and design tokens"
MCP_SERVER_NAME = "primevue-mcp"
RESOURCE_SCHEME = "primevue"

# --- Dataset ---

# Key holding the flat token map inside combined.json
TOKENS_KEY = "_tokens"

# Summary fields that are not reported as extra sections
STANDARD_SECTIONS = ("title", "description", "props", "examples")

# --- Upstream Library Layout ---

DEFAULT_LIBRARY_DIR = "node_modules/primevue"
DEFAULT_THEME_DIRS = (
    "node_modules/@primeuix/styles",
    "node_modules/@primeuix/styled",
)
DOCS_BASE_URL = "https://www.primevue.org"

# Seconds between documentation requests
DOCS_REQUEST_DELAY = 0.3

# Directory name -> PascalCase component name, for names that are not
# just a capitalized first letter
COMPONENT_NAME_MAP = {
    "inputtext": "InputText",
    "datatable": "DataTable",
    "inputnumber": "InputNumber",
    "inputmask": "InputMask",
    "inputswitch": "InputSwitch",
    "inputotp": "InputOtp",
    "inputchips": "InputChips",
    "inputgroup": "InputGroup",
    "inputgroupaddon": "InputGroupAddon",
    "inputicon": "InputIcon",
    "accordioncontent": "AccordionContent",
    "accordionheader": "AccordionHeader",
    "accordionpanel": "AccordionPanel",
    "accordiontab": "AccordionTab",
    "avatargroup": "AvatarGroup",
    "buttongroup": "ButtonGroup",
    "checkboxgroup": "CheckboxGroup",
    "radiobuttongroup": "RadioButtonGroup",
    "columngroup": "ColumnGroup",
    "confirmdialog": "ConfirmDialog",
    "confirmpopup": "ConfirmPopup",
    "contextmenu": "ContextMenu",
    "dataview": "DataView",
    "datepicker": "DatePicker",
    "deferredcontent": "DeferredContent",
    "dynamicdialog": "DynamicDialog",
    "dynamicdialogoptions": "DynamicDialogOptions",
    "floatlabel": "FloatLabel",
    "imagecompare": "ImageCompare",
    "inlinemessage": "InlineMessage",
    "multiselect": "MultiSelect",
    "orderlist": "OrderList",
    "organizationchart": "OrganizationChart",
    "overlaybadge": "OverlayBadge",
    "overlaypanel": "OverlayPanel",
    "panelmenu": "PanelMenu",
    "picklist": "PickList",
    "progressspinner": "ProgressSpinner",
    "radiobutton": "RadioButton",
    "scrollpanel": "ScrollPanel",
    "scrolltop": "ScrollTop",
    "selectbutton": "SelectButton",
    "speeddial": "SpeedDial",
    "splitbutton": "SplitButton",
    "splitterpanel": "SplitterPanel",
    "steplist": "StepList",
    "steppanel": "StepPanel",
    "steppanels": "StepPanels",
    "tablist": "TabList",
    "tabmenu": "TabMenu",
    "tabpanel": "TabPanel",
    "tabpanels": "TabPanels",
    "tabview": "TabView",
    "terminalservice": "TerminalService",
    "toastservice": "ToastService",
    "togglebutton": "ToggleButton",
    "toggleswitch": "ToggleSwitch",
}

# Vue reactivity primitives reported by the logic extractor
REACTIVITY_PRIMITIVES = (
    "ref",
    "reactive",
    "computed",
    "watch",
    "onMounted",
    "onUnmounted",
)

# Call-like tokens never reported as component methods
RESERVED_METHOD_NAMES = frozenset({"setup", "render"})

# --- Query Cache ---

CACHE_TTL_SECONDS = 5 * 60

# --- HTTP Server ---

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    "http_default": 10,
    "docs_request": 30,
}


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in seconds
    """
    if default is None:
        default = TIMEOUTS.get("http_default", 10)
    return TIMEOUTS.get(key, default)
