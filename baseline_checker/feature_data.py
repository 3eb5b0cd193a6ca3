"""
Embedded, hand-maintained feature table.

Entries are listed in the order the matcher reports them. Features with a fixed
`availability` are classified as-is; features with `baseline` dates are
classified against the analysis date.
"""

from datetime import date
from typing import Dict, Tuple

from .catalog import BaselineDates, FeatureDescriptor
from .issue import Availability

MDN = "https://developer.mozilla.org/docs"

EMBEDDED_FEATURES: Tuple[FeatureDescriptor, ...] = (
    FeatureDescriptor(
        id="dialog",
        name="HTML Dialog API",
        description="The <dialog> element represents a dialog box or other interactive component",
        detection_pattern=r"(?i)\.showModal\(\)|<dialog|HTMLDialogElement",
        group="html",
        availability=Availability.NEWLY_AVAILABLE,
        browser_support={"chrome": "37+", "firefox": "98+", "safari": "15.4+", "edge": "79+"},
        fallback="Modal div with ARIA attributes and focus management",
        polyfill="dialog-polyfill",
        documentation_url=f"{MDN}/Web/HTML/Element/dialog",
        spec_url="https://html.spec.whatwg.org/multipage/interactive-elements.html#the-dialog-element",
    ),
    FeatureDescriptor(
        id="array-at",
        name="Array.prototype.at()",
        description="The at() method takes an integer value and returns the item at that index",
        detection_pattern=r"\.at\s*\(\s*-?\d+\s*\)",
        group="javascript",
        availability=Availability.WIDELY_AVAILABLE,
        browser_support={"chrome": "92+", "firefox": "90+", "safari": "15.4+", "edge": "92+"},
        fallback="array[array.length - 1] or array.slice(-1)[0]",
        documentation_url=f"{MDN}/Web/JavaScript/Reference/Global_Objects/Array/at",
        spec_url="https://tc39.es/ecma262/#sec-array.prototype.at",
    ),
    FeatureDescriptor(
        id="optional-chaining",
        name="Optional Chaining (?.)",
        description="Reads deeply-nested object properties without validating each reference",
        detection_pattern=r"\?\.",
        group="javascript",
        availability=Availability.WIDELY_AVAILABLE,
        browser_support={"chrome": "80+", "firefox": "72+", "safari": "13.1+", "edge": "80+"},
        fallback="Manual null/undefined checks with &&",
        documentation_url=f"{MDN}/Web/JavaScript/Reference/Operators/Optional_chaining",
        spec_url="https://tc39.es/ecma262/#prod-OptionalExpression",
    ),
    FeatureDescriptor(
        id="nullish-coalescing",
        name="Nullish Coalescing (??)",
        description="Returns the right-hand operand when the left one is null or undefined",
        detection_pattern=r"\?\?",
        group="javascript",
        availability=Availability.WIDELY_AVAILABLE,
        browser_support={"chrome": "80+", "firefox": "72+", "safari": "13.1+", "edge": "80+"},
        fallback="value != null ? value : defaultValue",
        documentation_url=f"{MDN}/Web/JavaScript/Reference/Operators/Nullish_coalescing_operator",
    ),
    FeatureDescriptor(
        id="temporal-api",
        name="Temporal API",
        description="Modern date and time API replacing Date",
        detection_pattern=r"\bTemporal\.",
        group="javascript",
        availability=Availability.UNSUPPORTED,
        browser_support={"chrome": "none", "firefox": "none", "safari": "none", "edge": "none"},
        fallback="Date objects or a date library",
        polyfill="@js-temporal/polyfill",
        documentation_url="https://tc39.es/proposal-temporal/",
    ),
    FeatureDescriptor(
        id="object-hasown",
        name="Object.hasOwn()",
        description="Checks whether an object has the given property as its own property",
        detection_pattern=r"Object\.hasOwn\(",
        group="javascript",
        availability=Availability.NEWLY_AVAILABLE,
        browser_support={"chrome": "93+", "firefox": "92+", "safari": "15.4+", "edge": "93+"},
        fallback="Object.prototype.hasOwnProperty.call()",
        documentation_url=f"{MDN}/Web/JavaScript/Reference/Global_Objects/Object/hasOwn",
    ),
    FeatureDescriptor(
        id="container-queries",
        name="CSS Container Queries",
        description="Style elements based on the size of their containing element",
        detection_pattern=r"(?i)@container|container-type\s*:|container-name\s*:",
        group="css",
        availability=Availability.NEWLY_AVAILABLE,
        browser_support={"chrome": "105+", "firefox": "110+", "safari": "16.0+", "edge": "105+"},
        fallback="Media queries with JavaScript ResizeObserver",
        polyfill="container-query-polyfill",
        documentation_url=f"{MDN}/Web/CSS/CSS_Container_Queries",
        spec_url="https://www.w3.org/TR/css-contain-3/",
    ),
    FeatureDescriptor(
        id="css-has",
        name="CSS :has() Selector",
        description="Select elements that contain specific descendants",
        detection_pattern=r"(?i):has\(",
        group="css",
        availability=Availability.NEWLY_AVAILABLE,
        browser_support={"chrome": "105+", "firefox": "121+", "safari": "15.4+", "edge": "105+"},
        fallback="JavaScript querySelector with event delegation",
        polyfill="css-has-pseudo",
        documentation_url=f"{MDN}/Web/CSS/:has",
        spec_url="https://www.w3.org/TR/selectors-4/#relational",
    ),
    FeatureDescriptor(
        id="css-nesting",
        name="CSS Nesting",
        description="Nest style rules inside other style rules",
        detection_pattern=r"(?<!&)&(?!&)\s*[:{.#]",
        group="css",
        availability=Availability.NEWLY_AVAILABLE,
        browser_support={"chrome": "112+", "firefox": "117+", "safari": "16.5+", "edge": "112+"},
        fallback="Sass/SCSS preprocessing",
        documentation_url=f"{MDN}/Web/CSS/CSS_nesting",
    ),
    FeatureDescriptor(
        id="fetch-api",
        name="Fetch API",
        description="Promise-based interface for network requests",
        detection_pattern=r"\bfetch\s*\(",
        group="api",
        availability=Availability.WIDELY_AVAILABLE,
        browser_support={"chrome": "42+", "firefox": "39+", "safari": "10.1+", "edge": "14+"},
        fallback="XMLHttpRequest or axios library",
        documentation_url=f"{MDN}/Web/API/Fetch_API",
    ),
    FeatureDescriptor(
        id="structured-clone",
        name="structuredClone()",
        description="Deep-copies a value using the structured clone algorithm",
        detection_pattern=r"\bstructuredClone\s*\(",
        group="api",
        baseline=BaselineDates(low_date=date(2022, 3, 14), high_date=date(2024, 9, 14)),
        browser_support={"chrome": "98+", "firefox": "94+", "safari": "15.4+", "edge": "98+"},
        fallback="JSON.parse(JSON.stringify(value)) for plain data",
        documentation_url=f"{MDN}/Web/API/structuredClone",
    ),
    FeatureDescriptor(
        id="logical-properties",
        name="CSS Logical Properties",
        description="Flow-relative margin, padding, border and inset properties",
        detection_pattern=r"(?i)\b(?:margin|padding|border|inset)-(?:inline|block)(?:-start|-end)?(?:-\w+)?\s*:",
        group="css",
        baseline=BaselineDates(low_date=date(2021, 9, 20), high_date=date(2024, 3, 20)),
        browser_support={"chrome": "89+", "firefox": "66+", "safari": "15.0+", "edge": "89+"},
        fallback="Physical properties (margin-left/right, padding-top/bottom)",
        documentation_url=f"{MDN}/Web/CSS/CSS_logical_properties_and_values",
    ),
    FeatureDescriptor(
        id="array-group",
        name="Object.groupBy() / Map.groupBy()",
        description="Groups iterable elements by the key returned from a callback",
        detection_pattern=r"\b(?:Object|Map)\.groupBy\s*\(",
        group="javascript",
        baseline=BaselineDates(low_date=date(2024, 3, 5), high_date=date(2026, 9, 5)),
        browser_support={"chrome": "117+", "firefox": "119+", "safari": "17.4+", "edge": "117+"},
        fallback="Array.prototype.reduce() into an object or Map",
        polyfill="core-js/actual/object/group-by",
        documentation_url=f"{MDN}/Web/JavaScript/Reference/Global_Objects/Object/groupBy",
    ),
    FeatureDescriptor(
        id="view-transitions",
        name="View Transitions API",
        description="Animated transitions between DOM states",
        detection_pattern=r"(?i)startViewTransition\s*\(|view-transition-name\s*:",
        group="api",
        availability=Availability.LIMITED,
        browser_support={"chrome": "111+", "firefox": "none", "safari": "18.0+", "edge": "111+"},
        fallback="Skip the animation when document.startViewTransition is undefined",
        documentation_url=f"{MDN}/Web/API/View_Transition_API",
    ),
    FeatureDescriptor(
        id="anchor-positioning",
        name="CSS Anchor Positioning",
        description="Position elements relative to an anchor element",
        detection_pattern=r"(?i)\b(?:anchor-name|position-anchor)\s*:",
        group="css",
        browser_support={"chrome": "125+", "firefox": "none", "safari": "none", "edge": "125+"},
        fallback="JavaScript positioning library such as Floating UI",
        polyfill="@oddbird/css-anchor-positioning",
        documentation_url=f"{MDN}/Web/CSS/CSS_anchor_positioning",
    ),
)

DETECTION_PATTERNS: Dict[str, str] = {
    feature.id: feature.detection_pattern for feature in EMBEDDED_FEATURES
}
