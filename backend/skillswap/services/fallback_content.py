"""Static payloads served when the LLM provider cannot be used.

Canonical quizzes are keyed by skill name. Domain templates use ``string.Template``
placeholders: ``$skill`` for the topic as typed and ``$skill_ident`` for a
CamelCase identifier built from it.
"""

# Order matters: it is the tie-break order when two keys match with equally long aliases.
SKILL_ALIASES: dict[str, tuple[str, ...]] = {
    "java": ("java", "spring", "jvm", "maven", "gradle"),
    "javascript": ("javascript", "js", "ecmascript", "es6"),
    "react": ("react", "reactjs", "react.js", "jsx"),
    "python": ("python", "py", "django", "flask"),
    "html": ("html", "html5", "markup", "hypertext"),
    "css": ("css", "css3", "stylesheet", "styling"),
    "typescript": ("typescript", "ts", "tsx"),
    "vue": ("vue", "vuejs", "vue.js"),
    "angular": ("angular", "ng", "angularjs"),
    "c++": ("c++", "cpp", "cplusplus"),
    "c#": ("c#", "csharp", ".net"),
    "sql": ("sql", "database", "mysql", "postgresql"),
    "git": ("git", "github", "gitlab", "version control"),
    "docker": ("docker", "container", "kubernetes", "k8s"),
    "aws": ("aws", "amazon", "cloud", "lambda"),
    "node": ("node", "nodejs", "node.js", "backend"),
}

# Scanned in this order; the first domain with a matching keyword wins.
DOMAIN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technical": (
        "code",
        "programming",
        "software",
        "development",
        "algorithm",
        "data",
        "system",
        "network",
        "security",
        "database",
    ),
    "creative": ("design", "art", "music", "writing", "content", "creative", "visual", "media"),
    "business": (
        "management",
        "marketing",
        "sales",
        "finance",
        "strategy",
        "leadership",
        "project",
        "business",
    ),
    "science": ("research", "analysis", "experiment", "theory", "scientific", "study", "method"),
}
DEFAULT_DOMAIN = "general"

CANONICAL_QUIZZES: dict[str, list[dict]] = {
    "java": [
        {
            "question": "What is the output of this Java code considering method overriding and polymorphism?",
            "codeSnippet": 'class Parent {\n    void print() { System.out.println("Parent"); }\n}\nclass Child extends Parent {\n    void print() { System.out.println("Child"); }\n}\nParent p = new Child();\np.print();',
            "options": ["Parent", "Child", "Compilation error", "Runtime exception"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens to the strings once this list is cleared?",
            "codeSnippet": 'List<String> list = new ArrayList<>();\nfor (int i = 0; i < 1_000_000; i++) {\n    list.add(new String("Object " + i));\n}\nlist.clear();\nSystem.gc();',
            "options": [
                "They are freed immediately by clear()",
                "They become eligible for GC and are reclaimed when the collector runs",
                "They leak because the list still references them",
                "An OutOfMemoryError is thrown",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Which statement about this counter is true when many threads call increment() and getCount()?",
            "codeSnippet": "class Counter {\n    private int count = 0;\n    public synchronized void increment() { count++; }\n    public int getCount() { return count; }\n}",
            "options": [
                "increment() is atomic but getCount() may read a stale value",
                "Both methods are fully thread-safe",
                "increment() can deadlock",
                "The class does not compile",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "How does this Java generics code behave with type erasure?",
            "codeSnippet": "Generic<String> g1 = new Generic<>();\nGeneric<Integer> g2 = new Generic<>();\nSystem.out.println(g1.getClass() == g2.getClass());",
            "options": ["true", "false", "Compilation error", "Runtime exception"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does this Stream pipeline print?",
            "codeSnippet": "List<Integer> numbers = Arrays.asList(1, 2, 3, 4, 5);\nint result = numbers.stream()\n    .filter(n -> n % 2 == 0)\n    .mapToInt(Integer::intValue)\n    .sum();\nSystem.out.println(result);",
            "options": ["6", "9", "15", "0"],
            "correctAnswerIndex": 0,
        },
    ],
    "javascript": [
        {
            "question": "What is the output of this code considering the event loop and microtasks?",
            "codeSnippet": "Promise.resolve().then(() => console.log(1));\nsetTimeout(() => console.log(2), 0);\nPromise.resolve().then(() => console.log(3));\nconsole.log(4);",
            "options": ["4, 1, 3, 2", "1, 3, 4, 2", "4, 2, 1, 3", "2, 4, 1, 3"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Why is the large array below kept alive after createHandler() returns?",
            "codeSnippet": "function createHandler() {\n  const data = new Array(1000000).fill('x');\n  return () => console.log(data.length);\n}\nconst handler = createHandler();",
            "options": [
                "The returned closure captures data",
                "Arrays are never garbage collected",
                "fill() registers a global reference",
                "console.log keeps a reference to every argument",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does this function log?",
            "codeSnippet": "async function race() {\n  const p1 = new Promise(r => setTimeout(() => r(1), 100));\n  const p2 = Promise.reject(2);\n  try {\n    await Promise.all([p1, p2]);\n  } catch (e) { console.log(e); }\n}",
            "options": ["Logs 2 without waiting for p1", "Logs 1 after 100ms", "Never logs anything", "Throws TypeError"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "How does this Proxy affect property access?",
            "codeSnippet": "const handler = {\n  get(target, prop) {\n    return prop in target ? target[prop] : 'default';\n  },\n  set(target, prop, value) {\n    target[prop] = value * 2;\n    return true;\n  }\n};\nconst obj = new Proxy({}, handler);\nobj.x = 5;\nconsole.log(obj.x, obj.y);",
            "options": ["10 'default'", "5 'default'", "10 undefined", "5 undefined"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is the result of this destructuring with default values?",
            "codeSnippet": "const {a = 1, b: {c = 2} = {}, d = 3} = {a: undefined, b: {c: undefined}};\nconsole.log(a, c, d);",
            "options": ["1 2 3", "undefined undefined 3", "1 undefined 3", "undefined 2 3"],
            "correctAnswerIndex": 0,
        },
    ],
    "react": [
        {
            "question": "Which change stops Child from re-rendering every time count changes?",
            "codeSnippet": "const Parent = ({ items }) => {\n  const [count, setCount] = useState(0);\n  return <Child data={items} onClick={() => setCount(c => c + 1)} />;\n};",
            "options": [
                "useCallback for onClick only",
                "React.memo for Child only",
                "useMemo for items",
                "React.memo for Child together with useCallback for onClick",
            ],
            "correctAnswerIndex": 3,
        },
        {
            "question": "What value does Consumer read from ThemeContext?",
            "codeSnippet": "const ThemeContext = createContext('light');\nconst App = () => (\n  <ThemeContext.Provider value='dark'>\n    <ThemeContext.Provider value='light'>\n      <Consumer />\n    </ThemeContext.Provider>\n  </ThemeContext.Provider>\n);",
            "options": ["'light' (nearest provider)", "'dark' (outer provider)", "Throws an error", "undefined"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "When does the cleanup function of this effect run?",
            "codeSnippet": "useEffect(() => {\n  console.log('effect');\n  return () => console.log('cleanup');\n}, [props.data]);",
            "options": [
                "Before the next effect run and on unmount",
                "Only on unmount",
                "After the next effect run",
                "Never",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What happens when the button is clicked once?",
            "codeSnippet": "function Counter() {\n  const [count, setCount] = useState(0);\n  const handleClick = () => {\n    setCount(c => c + 1);\n    setCount(c => c + 1);\n    setCount(2);\n  };\n  return <button onClick={handleClick}>{count}</button>;\n}",
            "options": [
                "One re-render with count = 2",
                "Two re-renders: 1 then 2",
                "Three re-renders: 1, 2, 2",
                "An error is thrown",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What can a parent do through the ref passed to FancyInput?",
            "codeSnippet": "const FancyInput = React.forwardRef((props, ref) => {\n  const inputRef = useRef();\n  useImperativeHandle(ref, () => ({\n    focus: () => inputRef.current.focus(),\n    value: () => inputRef.current.value\n  }));\n  return <input ref={inputRef} {...props} />;\n});",
            "options": [
                "Call only focus() and value()",
                "Use every DOM method of the input",
                "Nothing, the ref stays null",
                "It throws an error",
            ],
            "correctAnswerIndex": 0,
        },
    ],
    "python": [
        {
            "question": "What is the method resolution order of D?",
            "codeSnippet": "class A: pass\nclass B(A): pass\nclass C(A): pass\nclass D(B, C): pass\nprint(D.__mro__)",
            "options": ["(D, B, C, A, object)", "(D, B, A, C, object)", "(D, C, B, A, object)", "(D, A, B, C, object)"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does this script print?",
            "codeSnippet": "from contextlib import contextmanager\n\n@contextmanager\ndef cm():\n    print('enter')\n    yield\n    print('exit')\n\ndef gen():\n    with cm():\n        yield 1\n        yield 2\n\ng = gen()\nprint(next(g))\nprint(next(g))",
            "options": ["enter, 1, 2", "enter, 1, exit, 2", "1, 2, enter, exit", "enter, exit, 1, 2"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is the result of this metaclass manipulation?",
            "codeSnippet": "class Meta(type):\n    def __new__(cls, name, bases, attrs):\n        attrs['x'] = 42\n        return super().__new__(cls, name, bases, attrs)\n\nclass Test(metaclass=Meta):\n    pass\n\nprint(hasattr(Test, 'x'), hasattr(Test(), 'x'))",
            "options": ["True True", "True False", "False True", "False False"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What happens on `Test().x` with this descriptor?",
            "codeSnippet": "class Descriptor:\n    def __get__(self, obj, cls=None):\n        if obj is None:\n            return self\n        return obj.__dict__[self.name]\n\n    def __set_name__(self, cls, name):\n        self.name = name\n\nclass Test:\n    x = Descriptor()",
            "options": [
                "KeyError, because nothing was stored in the instance __dict__",
                "Returns None",
                "Returns the descriptor instance",
                "Infinite recursion",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does main() return?",
            "codeSnippet": "async def task():\n    try:\n        await asyncio.sleep(1)\n        return 'done'\n    except asyncio.CancelledError:\n        return 'cancelled'\n\nasync def main():\n    t = asyncio.create_task(task())\n    await asyncio.sleep(0.1)\n    t.cancel()\n    return await t",
            "options": ["'cancelled'", "'done'", "Raises CancelledError", "None"],
            "correctAnswerIndex": 0,
        },
    ],
    "html": [
        {
            "question": "How good is the accessibility of this page skeleton?",
            "codeSnippet": "<header>\n  <nav aria-label='main'>\n    <ul><li><a href='/'>Home</a></li></ul>\n  </nav>\n</header>\n<main>\n  <article>\n    <section aria-labelledby='title'>\n      <h2 id='title'>Article Title</h2>\n    </section>\n  </article>\n  <aside aria-label='sidebar'></aside>\n</main>",
            "options": [
                "The landmarks are already well structured",
                "Replace the semantic tags with <div>",
                "Remove the aria-labels",
                "Add role='application' to <main>",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What happens to the children written inside <custom-el>?",
            "codeSnippet": "class CustomEl extends HTMLElement {\n  connectedCallback() {\n    this.attachShadow({mode: 'open'});\n    this.shadowRoot.innerHTML = `<slot></slot>`;\n  }\n}\ncustomElements.define('custom-el', CustomEl);",
            "options": [
                "They render through the default slot",
                "They are hidden",
                "An error is thrown",
                "They need a named slot to render",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is the main weakness of this Content Security Policy?",
            "codeSnippet": "Content-Security-Policy: default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline';",
            "options": [
                "'unsafe-inline' in script-src re-enables inline script injection",
                "It is too restrictive to load same-origin scripts",
                "default-src 'self' blocks all images",
                "style-src cannot be combined with script-src",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does this form do on submit with an invalid email?",
            "codeSnippet": "<form id='form' novalidate>\n  <input type='email' required>\n  <input type='submit'>\n</form>\n<script>\nform.addEventListener('submit', e => {\n  if (!form.checkValidity()) e.preventDefault();\n});\n</script>",
            "options": [
                "Submission is prevented by the script",
                "The form always submits",
                "No validation happens at all",
                "Validation only runs on blur",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "How many columns does the body of this table occupy?",
            "codeSnippet": "<table>\n  <thead><tr><th colspan='2'>Header</th></tr></thead>\n  <tbody>\n    <tr><td rowspan='2'>Cell 1</td><td>Cell 2</td></tr>\n    <tr><td>Cell 3</td></tr>\n  </tbody>\n</table>",
            "options": ["2", "3", "1", "4"],
            "correctAnswerIndex": 0,
        },
    ],
    "css": [
        {
            "question": "Which property lets the browser animate these elements on the compositor?",
            "codeSnippet": ".child {\n  width: 10px;\n  height: 10px;\n  /* animated */\n}",
            "options": ["transform", "top/left", "margin", "width"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does `contain: layout paint` on .card do?",
            "codeSnippet": ".card {\n  contain: layout paint;\n}\n.card:hover {\n  transform: scale(1.05);\n  transition: transform 0.3s;\n}",
            "options": [
                "Limits layout and paint work to the card's subtree",
                "Prevents the transform animation",
                "Forces a layout of the whole page on hover",
                "Has no effect on rendering",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is the specificity (ids, classes, types) of this selector?",
            "codeSnippet": "#app .container > div.item[data-type='primary']:not(.disabled)::before",
            "options": ["(1, 4, 2)", "(1, 3, 1)", "(0, 4, 2)", "(1, 2, 2)"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Which colour does a .child inside .parent get?",
            "codeSnippet": ":root { --color: blue; }\n.parent { --color: red; }\n.child { color: var(--color, var(--fallback, green)); }",
            "options": ["red", "blue", "green", "The declaration is invalid"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Which of these declarations creates a new stacking context on its own?",
            "codeSnippet": ".a { position: static; z-index: 5; }\n.b { opacity: 0.99; }\n.c { margin: 0 auto; }\n.d { display: inline; }",
            "options": [".b", ".a", ".c", ".d"],
            "correctAnswerIndex": 0,
        },
    ],
    "typescript": [
        {
            "question": "What is type B?",
            "codeSnippet": "type A = { a: string } & { a: number };\ntype B = A['a'];",
            "options": ["never", "string | number", "string", "unknown"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does this conditional type resolve to?",
            "codeSnippet": "type ToArray<T> = T extends any ? T[] : never;\ntype R = ToArray<string | number>;",
            "options": ["string[] | number[]", "(string | number)[]", "never", "unknown[]"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is the type Mode?",
            "codeSnippet": "const config = { mode: 'dark' } as const;\ntype Mode = typeof config.mode;",
            "options": ["string", "'dark'", "readonly string", "any"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Does this code type-check?",
            "codeSnippet": "const palette = {\n  red: [255, 0, 0],\n  green: '#00ff00',\n} satisfies Record<string, string | number[]>;\npalette.green.toUpperCase();",
            "options": [
                "Yes, green keeps its inferred string type",
                "No, green is widened to string | number[]",
                "No, satisfies cannot be used on object literals",
                "It compiles but throws at runtime",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does the compiler report for area()?",
            "codeSnippet": "function assertNever(x: never): never { throw new Error(); }\ntype Shape = { kind: 'circle' } | { kind: 'square' };\nfunction area(s: Shape) {\n  switch (s.kind) {\n    case 'circle': return 1;\n    default: return assertNever(s);\n  }\n}",
            "options": [
                "Nothing, it compiles",
                "An error: the square shape is not assignable to never",
                "A runtime error only",
                "A warning that assertNever is unused",
            ],
            "correctAnswerIndex": 1,
        },
    ],
    "vue": [
        {
            "question": "What is state.count after this code runs?",
            "codeSnippet": "const state = reactive({ count: 0 });\nlet { count } = state;\ncount++;",
            "options": ["1", "0", "undefined", "A reactivity warning and then 1"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "How many times does the getter run if `double` is read twice in one render and n does not change?",
            "codeSnippet": "let calls = 0;\nconst n = ref(2);\nconst double = computed(() => { calls++; return n.value * 2; });",
            "options": ["Once", "Twice", "On every render regardless of n", "Never"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Does the callback run after state.items.push(4)?",
            "codeSnippet": "const state = reactive({ items: [1, 2, 3] });\nwatch(() => state.items, () => console.log('changed'));\nstate.items.push(4);",
            "options": [
                "Yes, array mutations always trigger getter watchers",
                "No, the getter returns the same array; it needs { deep: true }",
                "It throws because items is reactive",
                "It runs once during setup only",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens with v-if and v-for on the same element in Vue 3?",
            "codeSnippet": "<li v-for=\"user in users\" v-if=\"user.active\">{{ user.name }}</li>",
            "options": [
                "v-for runs first and filters the list",
                "v-if runs first, so user is not defined in its condition",
                "They are evaluated in parallel",
                "The template is silently skipped",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What is logged when count starts at 0 and el renders {{ count }}?",
            "codeSnippet": "count.value++;\nconsole.log(el.textContent);\nawait nextTick();\nconsole.log(el.textContent);",
            "options": ["0 then 1", "1 then 1", "0 then 0", "1 then 2"],
            "correctAnswerIndex": 0,
        },
    ],
    "angular": [
        {
            "question": "The parent runs `this.user.name = 'B'` on a component using OnPush. What does the child show?",
            "codeSnippet": "@Component({\n  selector: 'app-child',\n  template: '{{ user.name }}',\n  changeDetection: ChangeDetectionStrategy.OnPush,\n})\nexport class ChildComponent {\n  @Input() user!: User;\n}",
            "options": [
                "The new name",
                "The old name, because the input reference did not change",
                "ExpressionChangedAfterItHasBeenCheckedError",
                "The child is recreated",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens to in-flight requests in this typeahead?",
            "codeSnippet": "this.results$ = this.query$.pipe(\n  debounceTime(300),\n  switchMap(q => this.api.search(q)),\n);",
            "options": [
                "Requests for older queries are cancelled",
                "All responses are emitted in arrival order",
                "Requests are queued one after another",
                "Only the first query is ever sent",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "A service is `providedIn: 'root'` and also listed in a lazy-loaded module's providers. How many instances exist?",
            "codeSnippet": "@Injectable({ providedIn: 'root' })\nexport class CartService {}\n\n@NgModule({ providers: [CartService] })\nexport class ShopModule {}",
            "options": [
                "One application-wide instance",
                "Two: the lazy module gets its own instance",
                "A compilation error about duplicate providers",
                "None inside the lazy module",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What is logged?",
            "codeSnippet": "const count = signal(1);\nconst double = computed(() => count() * 2);\ncount.set(5);\nconsole.log(double());",
            "options": ["2", "10", "5", "undefined"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What does this lifecycle hook cause in development mode when title is bound in the template?",
            "codeSnippet": "ngAfterViewInit() {\n  this.title = 'Updated';\n}",
            "options": [
                "ExpressionChangedAfterItHasBeenCheckedError",
                "A silent update in the same pass",
                "An infinite change detection loop",
                "Nothing, the view ignores the change",
            ],
            "correctAnswerIndex": 0,
        },
    ],
    "c++": [
        {
            "question": "What does this code print?",
            "codeSnippet": "std::vector<int> v{1, 2, 3};\nauto it = v.begin();\nv.push_back(4);\nstd::cout << *it;",
            "options": ["1", "Undefined behavior", "4", "Compilation error"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What does call(d) print?",
            "codeSnippet": "struct Base {\n  virtual ~Base() = default;\n  virtual void f() { std::cout << \"B\"; }\n};\nstruct D : Base {\n  void f() override { std::cout << \"D\"; }\n};\nvoid call(Base b) { b.f(); }\nD d;\ncall(d);",
            "options": ["D", "B", "Compilation error", "Undefined behavior"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens here?",
            "codeSnippet": "std::unique_ptr<int> a = std::make_unique<int>(5);\nstd::unique_ptr<int> b = a;",
            "options": [
                "a and b share ownership",
                "Compilation error: the copy constructor is deleted",
                "a becomes null",
                "Double free at runtime",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What is printed (C++17)?",
            "codeSnippet": "int x = 0;\nauto f = [x]() mutable { return ++x; };\nf();\nf();\nstd::cout << x << f();",
            "options": ["03", "33", "01", "23"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is printed?",
            "codeSnippet": "const std::string s = \"hello\";\nstd::string t = std::move(s);\nstd::cout << s.size();",
            "options": ["0", "5", "Undefined behavior", "Compilation error"],
            "correctAnswerIndex": 1,
        },
    ],
    "c#": [
        {
            "question": "What is printed?",
            "codeSnippet": "var list = new List<int> { 1, 2, 3 };\nvar q = list.Where(x => x > 1);\nlist.Add(4);\nConsole.WriteLine(q.Count());",
            "options": ["2", "3", "4", "1"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Where does the exception thrown in Handler() surface?",
            "codeSnippet": "async void Handler() {\n    await Task.Delay(10);\n    throw new InvalidOperationException();\n}\ntry { Handler(); } catch (Exception) { /* ... */ }",
            "options": [
                "In the caller's catch block",
                "On the synchronization context, bypassing the caller's try/catch",
                "It is silently swallowed",
                "In an AggregateException returned to the caller",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What is printed?",
            "codeSnippet": "struct Point { public int X; }\nvar a = new Point { X = 1 };\nvar b = a;\nb.X = 5;\nConsole.WriteLine(a.X);",
            "options": ["1", "5", "0", "Compilation error"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What are the two printed values?",
            "codeSnippet": "string a = \"hi\";\nstring b = new string(new[] { 'h', 'i' });\nConsole.WriteLine(a == b);\nConsole.WriteLine((object)a == (object)b);",
            "options": ["True, True", "True, False", "False, False", "False, True"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "In which order are the resources disposed at the end of the scope?",
            "codeSnippet": "using var a = new Res(\"A\");\nusing var b = new Res(\"B\");",
            "options": ["A then B", "B then A", "Only B", "Nondeterministic"],
            "correctAnswerIndex": 1,
        },
    ],
    "sql": [
        {
            "question": "The table has 10 rows and 3 of them have a NULL manager_id. What is returned?",
            "codeSnippet": "SELECT COUNT(*), COUNT(manager_id) FROM employees;",
            "options": ["10, 10", "10, 7", "7, 7", "7, 10"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "How does the WHERE clause change this LEFT JOIN?",
            "codeSnippet": "SELECT *\nFROM a\nLEFT JOIN b ON a.id = b.a_id\nWHERE b.status = 'active';",
            "options": [
                "All rows of a are still kept",
                "It effectively becomes an inner join",
                "It is a syntax error",
                "Unmatched rows of b are added",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "orders.user_id contains a NULL. What does this query return?",
            "codeSnippet": "SELECT name FROM users\nWHERE id NOT IN (SELECT user_id FROM orders);",
            "options": ["Users without orders", "No rows", "All users", "An error"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Can the index be used for a seek with this predicate?",
            "codeSnippet": "CREATE INDEX idx_name ON people (last_name, first_name);\nSELECT * FROM people WHERE first_name = 'Ann';",
            "options": [
                "Yes, a seek on first_name",
                "No seek, because the leading column last_name is not constrained",
                "Only for small tables",
                "Only with an index hint",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "One department has salaries 100, 100 and 90. Which ranks are produced?",
            "codeSnippet": "SELECT dept, salary,\n       RANK() OVER (PARTITION BY dept ORDER BY salary DESC) AS r\nFROM emp;",
            "options": ["1, 2, 3", "1, 1, 2", "1, 1, 3", "1, 2, 2"],
            "correctAnswerIndex": 2,
        },
    ],
    "git": [
        {
            "question": "What does this command do?",
            "codeSnippet": "git reset --soft HEAD~1",
            "options": [
                "Discards the last commit and its changes",
                "Moves HEAD back one commit and keeps the changes staged",
                "Unstages the changes but keeps the commit",
                "Creates a revert commit",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens to the feature branch commits after this rebase?",
            "codeSnippet": "git checkout feature\ngit rebase main",
            "options": [
                "They are rewritten with new hashes",
                "Their hashes stay the same",
                "main is rewritten",
                "A merge commit is created",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does --no-ff guarantee?",
            "codeSnippet": "git merge --no-ff feature",
            "options": [
                "A merge commit is created even when a fast-forward is possible",
                "The merge is aborted on conflicts",
                "Only fast-forward merges are allowed",
                "The feature commits are squashed",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "How does git revert differ from git reset?",
            "codeSnippet": "git revert 3f2a1c9",
            "options": [
                "It deletes the commit from history",
                "It adds a new commit that undoes the changes",
                "It moves the branch pointer back",
                "It stashes the changes",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens to the commit made in detached HEAD state?",
            "codeSnippet": "git checkout 3f2a1c9\n# edit files\ngit commit -am 'experiment'\ngit checkout main",
            "options": [
                "It is lost immediately",
                "It is merged into main",
                "It becomes unreachable but can be recovered through the reflog",
                "Git refuses to switch branches",
            ],
            "correctAnswerIndex": 2,
        },
    ],
    "docker": [
        {
            "question": "What is the caching problem with this Dockerfile?",
            "codeSnippet": "FROM python:3.12-slim\nWORKDIR /app\nCOPY . .\nRUN pip install -r requirements.txt",
            "options": [
                "Dependencies are reinstalled on every source change",
                "There is none, the cache is unaffected",
                "The build fails",
                "Only requirement changes trigger a reinstall",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Which process runs for `docker run img --port 9000`?",
            "codeSnippet": "ENTRYPOINT [\"python\", \"app.py\"]\nCMD [\"--port\", \"8000\"]",
            "options": [
                "python app.py --port 8000",
                "python app.py --port 9000",
                "--port 9000",
                "python app.py --port 8000 --port 9000",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What is the problem with this shell-form CMD on `docker stop`?",
            "codeSnippet": "CMD python app.py",
            "options": [
                "python receives SIGTERM directly",
                "/bin/sh is PID 1 and may not forward SIGTERM to python",
                "Docker rejects the shell form",
                "The container restarts automatically",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What ends up in the final image?",
            "codeSnippet": "FROM node:20 AS build\nRUN npm ci && npm run build\n\nFROM nginx:alpine\nCOPY --from=build /app/dist /usr/share/nginx/html",
            "options": [
                "The node toolchain and the build output",
                "Only the nginx stage layers with the copied output",
                "Two separate images",
                "Nothing, --target is required",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens to the database files after `docker rm` of this container?",
            "codeSnippet": "docker run -d -v pgdata:/var/lib/postgresql/data postgres:16",
            "options": [
                "They are deleted with the container",
                "They persist in the named volume",
                "The volume becomes read-only",
                "They are copied into the image",
            ],
            "correctAnswerIndex": 1,
        },
    ],
    "aws": [
        {
            "question": "An IAM policy allows s3:GetObject and the bucket policy explicitly denies it. What happens?",
            "codeSnippet": "{\n  \"Effect\": \"Deny\",\n  \"Principal\": \"*\",\n  \"Action\": \"s3:GetObject\",\n  \"Resource\": \"arn:aws:s3:::reports/*\"\n}",
            "options": ["Access is allowed", "Access is denied", "The newest policy wins", "The bucket policy is ignored"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "How is `client` treated across Lambda invocations?",
            "codeSnippet": "import boto3\nclient = boto3.client('dynamodb')\n\ndef handler(event, context):\n    return client.get_item(...)",
            "options": [
                "Created again on every invocation",
                "Reused across warm invocations of the same execution environment",
                "Shared by all concurrent execution environments",
                "Persisted between deployments",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Which delivery guarantees does an SQS standard queue give?",
            "codeSnippet": "aws sqs create-queue --queue-name jobs",
            "options": [
                "Exactly-once delivery with strict ordering",
                "At-least-once delivery with best-effort ordering",
                "At-most-once delivery with strict ordering",
                "Exactly-once delivery without ordering",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Every write today uses the same partition key. What is the likely outcome?",
            "codeSnippet": "table.put_item(Item={'pk': '2024-06-01', 'sk': event_id, ...})",
            "options": [
                "Writes are spread evenly",
                "A hot partition and throttled writes",
                "Unlimited throughput through automatic resharding",
                "Writes are queued indefinitely",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "A security group allows inbound 443 and has no outbound rules. Do responses reach clients?",
            "codeSnippet": "Inbound:  TCP 443 from 0.0.0.0/0\nOutbound: (none)",
            "options": [
                "No, responses are blocked",
                "Yes, security groups are stateful",
                "Only if a NACL allows ephemeral ports outbound",
                "Only through a NAT gateway",
            ],
            "correctAnswerIndex": 1,
        },
    ],
    "node": [
        {
            "question": "In which order are the messages logged?",
            "codeSnippet": "setImmediate(() => console.log('immediate'));\nprocess.nextTick(() => console.log('tick'));\nPromise.resolve().then(() => console.log('promise'));\nconsole.log('sync');",
            "options": [
                "sync, tick, promise, immediate",
                "sync, promise, tick, immediate",
                "tick, sync, promise, immediate",
                "sync, immediate, tick, promise",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What is the effect of readFileSync inside a request handler?",
            "codeSnippet": "http.createServer((req, res) => {\n  const body = fs.readFileSync('./big.json');\n  res.end(body);\n}).listen(3000);",
            "options": [
                "It blocks the event loop for every client",
                "It runs in the libuv thread pool without blocking",
                "It only blocks the current request",
                "Node converts it to an async call",
            ],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What does pipe() do when the writable side is slow?",
            "codeSnippet": "fs.createReadStream('huge.log').pipe(slowWritable);",
            "options": [
                "Buffers data in memory without limit",
                "Pauses the readable until the writable emits 'drain'",
                "Drops chunks",
                "Throws an error",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What happens with an unhandled promise rejection on Node 15 or later?",
            "codeSnippet": "Promise.reject(new Error('boom'));",
            "options": [
                "Only a warning is printed",
                "The process exits with a non-zero code",
                "The rejection is ignored",
                "The promise is retried",
            ],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What does require('./m') return?",
            "codeSnippet": "// m.js\nexports = { a: 1 };",
            "options": ["{ a: 1 }", "{}", "undefined", "A ReferenceError"],
            "correctAnswerIndex": 1,
        },
    ],
}

DOMAIN_QUESTION_TEMPLATES: dict[str, list[dict]] = {
    "technical": [
        {
            "question": "What is the most critical performance consideration when working with $skill?",
            "codeSnippet": "// $skill performance analysis\nconst factors = {\n  speed: 'Execution efficiency',\n  memory: 'Resource usage',\n  scalability: 'Growth capability',\n  reliability: 'System stability'\n};",
            "options": ["Execution speed", "Memory efficiency", "Scalability", "Reliability"],
            "correctAnswerIndex": 2,
        },
        {
            "question": "How would you optimize this $skill implementation for production use?",
            "codeSnippet": "// $skill optimization scenario\nfunction process$skill_ident(data) {\n  return transform(data);\n}",
            "options": ["Caching", "Parallel processing", "Code refactoring", "Algorithm improvement"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What security consideration matters most for $skill applications?",
            "codeSnippet": "// $skill security assessment\nconst concerns = {\n  data: 'Information protection',\n  access: 'Control mechanisms',\n  integrity: 'Data validation',\n  availability: 'System uptime'\n};",
            "options": ["Data protection", "Access control", "Data integrity", "System availability"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Which architectural pattern best suits $skill development?",
            "codeSnippet": "// $skill architecture options\nconst patterns = {\n  monolithic: 'Single unit',\n  modular: 'Separated components',\n  microservices: 'Distributed services',\n  serverless: 'Event-driven'\n};",
            "options": ["Monolithic", "Modular", "Microservices", "Serverless"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "How do you handle errors in $skill projects?",
            "codeSnippet": "// $skill error handling\ntry {\n  process$skill_ident();\n} catch (error) {\n  // strategy?\n}",
            "options": ["Silent failure", "Graceful degradation", "Immediate crash", "Retry mechanism"],
            "correctAnswerIndex": 1,
        },
    ],
    "creative": [
        {
            "question": "What principle guides effective $skill design?",
            "codeSnippet": "// $skill design principles\nconst principles = {\n  balance: 'Visual harmony',\n  contrast: 'Element differentiation',\n  hierarchy: 'Importance structure',\n  rhythm: 'Pattern repetition'\n};",
            "options": ["Balance", "Contrast", "Hierarchy", "Rhythm"],
            "correctAnswerIndex": 2,
        },
        {
            "question": "Which phase is most critical for creative problem-solving in $skill?",
            "codeSnippet": "// $skill creative process\n1. Research and analysis\n2. Ideation and brainstorming\n3. Prototyping and testing\n4. Refinement and finalization",
            "options": ["Research", "Ideation", "Prototyping", "Refinement"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What makes $skill work impactful?",
            "codeSnippet": "// $skill impact factors\nconst factors = {\n  originality: 'Unique approach',\n  execution: 'Technical quality',\n  relevance: 'Audience connection',\n  innovation: 'New perspective'\n};",
            "options": ["Originality", "Execution", "Relevance", "Innovation"],
            "correctAnswerIndex": 2,
        },
        {
            "question": "Which constraint is usually the hardest to balance against creativity in $skill?",
            "codeSnippet": "// $skill constraint management\nconst constraints = {\n  time: 'Deadline pressure',\n  budget: 'Resource limits',\n  scope: 'Project boundaries',\n  quality: 'Standards requirements'\n};",
            "options": ["Time constraints", "Budget limits", "Scope boundaries", "Quality standards"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Which kind of tooling tends to make $skill work most productive?",
            "codeSnippet": "// $skill tool selection\nconst tools = {\n  digital: 'Software solutions',\n  traditional: 'Manual methods',\n  hybrid: 'Combined approach',\n  automated: 'AI-assisted'\n};",
            "options": ["Digital tools", "Traditional methods", "Hybrid approach", "AI automation"],
            "correctAnswerIndex": 2,
        },
    ],
    "business": [
        {
            "question": "What strategy drives success in $skill?",
            "codeSnippet": "// $skill strategic planning\nconst strategies = {\n  cost: 'Price leadership',\n  differentiation: 'Unique value',\n  focus: 'Niche specialization',\n  growth: 'Market expansion'\n};",
            "options": ["Cost leadership", "Differentiation", "Focus strategy", "Growth strategy"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "How do you measure ROI for $skill initiatives?",
            "codeSnippet": "// $skill ROI metrics\nconst metrics = {\n  financial: 'Monetary returns',\n  operational: 'Efficiency gains',\n  strategic: 'Market position',\n  customer: 'Satisfaction scores'\n};",
            "options": ["Financial returns", "Operational efficiency", "Strategic position", "Customer satisfaction"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Which risk deserves the highest priority in $skill projects?",
            "codeSnippet": "// $skill risk assessment\nconst risks = {\n  market: 'Demand changes',\n  operational: 'Process failures',\n  financial: 'Budget overruns',\n  reputational: 'Brand damage'\n};",
            "options": ["Market risks", "Operational risks", "Financial risks", "Reputational risks"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Which team role is critical for $skill success?",
            "codeSnippet": "// $skill team composition\nconst roles = {\n  leadership: 'Strategic direction',\n  execution: 'Implementation',\n  support: 'Enabling functions',\n  innovation: 'Creative input'\n};",
            "options": ["Leadership", "Execution", "Support", "Innovation"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Which metrics best indicate $skill performance ahead of time?",
            "codeSnippet": "// $skill KPI tracking\nconst indicators = {\n  quantitative: 'Numerical measures',\n  qualitative: 'Subjective assessment',\n  leading: 'Predictive signals',\n  lagging: 'Historical results'\n};",
            "options": ["Quantitative", "Qualitative", "Leading", "Lagging"],
            "correctAnswerIndex": 2,
        },
    ],
    "science": [
        {
            "question": "What methodology gives the most rigorous $skill results?",
            "codeSnippet": "// $skill research methods\nconst methods = {\n  experimental: 'Controlled studies',\n  observational: 'Natural behavior',\n  theoretical: 'Mathematical models',\n  computational: 'Simulation analysis'\n};",
            "options": ["Experimental", "Observational", "Theoretical", "Computational"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "How do you validate $skill findings?",
            "codeSnippet": "// $skill validation process\nconst steps = {\n  replication: 'Repeat studies',\n  peer: 'Expert review',\n  statistical: 'Data analysis',\n  practical: 'Real-world testing'\n};",
            "options": ["Replication", "Peer review", "Statistical analysis", "Practical testing"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "What ethical consideration has priority in $skill?",
            "codeSnippet": "// $skill ethics assessment\nconst concerns = {\n  consent: 'Participant agreement',\n  privacy: 'Data protection',\n  integrity: 'Honest reporting',\n  impact: 'Societal effects'\n};",
            "options": ["Informed consent", "Privacy protection", "Research integrity", "Societal impact"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "How do you analyze data in $skill studies?",
            "codeSnippet": "// $skill data analysis\nconst approaches = {\n  descriptive: 'Summary statistics',\n  inferential: 'Hypothesis testing',\n  predictive: 'Model forecasting',\n  prescriptive: 'Optimization'\n};",
            "options": ["Descriptive", "Inferential", "Predictive", "Prescriptive"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "Which tools matter most for $skill research?",
            "codeSnippet": "// $skill research tools\nconst equipment = {\n  measurement: 'Data collection',\n  analysis: 'Processing software',\n  visualization: 'Result presentation',\n  collaboration: 'Team coordination'\n};",
            "options": ["Measurement tools", "Analysis software", "Visualization tools", "Collaboration platforms"],
            "correctAnswerIndex": 1,
        },
    ],
    "general": [
        {
            "question": "What ability is most valuable for $skill mastery?",
            "codeSnippet": "// $skill skill assessment\nconst abilities = {\n  technical: 'Domain knowledge',\n  creative: 'Innovative thinking',\n  analytical: 'Problem solving',\n  communication: 'Information exchange'\n};",
            "options": ["Technical knowledge", "Creative thinking", "Analytical skills", "Communication"],
            "correctAnswerIndex": 2,
        },
        {
            "question": "How do you approach learning $skill effectively?",
            "codeSnippet": "// $skill learning strategy\nconst methods = {\n  theoretical: 'Study concepts',\n  practical: 'Hands-on experience',\n  collaborative: 'Group learning',\n  selfDirected: 'Independent exploration'\n};",
            "options": ["Theory study", "Practice", "Collaboration", "Self-directed"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What challenge is most common when learning $skill?",
            "codeSnippet": "// $skill learning obstacles\nconst barriers = {\n  complexity: 'Difficult concepts',\n  resources: 'Limited materials',\n  time: 'Insufficient practice',\n  motivation: 'Low engagement'\n};",
            "options": ["Complexity", "Resource limits", "Time constraints", "Motivation"],
            "correctAnswerIndex": 0,
        },
        {
            "question": "Where is $skill most often applied?",
            "codeSnippet": "// $skill practical application\nconst contexts = {\n  academic: 'Educational settings',\n  professional: 'Work environments',\n  personal: 'Individual projects',\n  community: 'Group activities'\n};",
            "options": ["Academic", "Professional", "Personal", "Community"],
            "correctAnswerIndex": 1,
        },
        {
            "question": "What resource supports $skill development the most?",
            "codeSnippet": "// $skill resource types\nconst materials = {\n  books: 'Written guides',\n  courses: 'Structured learning',\n  mentors: 'Expert guidance',\n  practice: 'Applied experience'\n};",
            "options": ["Books", "Courses", "Mentors", "Practice"],
            "correctAnswerIndex": 3,
        },
    ],
}

ROADMAP_STEP_TEMPLATES: list[dict] = [
    {
        "title": "Getting Started with $skill",
        "description": "Learn the fundamentals and basic concepts of $skill",
        "duration": "1-2 weeks",
        "resources": ["Official documentation", "Beginner tutorials", "Practice exercises"],
    },
    {
        "title": "Core $skill Concepts",
        "description": "Deep dive into essential concepts and principles",
        "duration": "2-3 weeks",
        "resources": ["Video courses", "Hands-on projects", "Community forums"],
    },
    {
        "title": "Practical Application",
        "description": "Apply your knowledge through real-world projects",
        "duration": "3-4 weeks",
        "resources": ["Project templates", "Code repositories", "Mentorship programs"],
    },
    {
        "title": "Advanced Techniques",
        "description": "Master advanced concepts and best practices",
        "duration": "4-6 weeks",
        "resources": ["Advanced documentation", "Expert tutorials", "Case studies"],
    },
    {
        "title": "Specialization",
        "description": "Focus on specific areas of expertise within $skill",
        "duration": "6-8 weeks",
        "resources": ["Specialized courses", "Research papers", "Professional workshops"],
    },
    {
        "title": "Mastery & Portfolio",
        "description": "Build a comprehensive portfolio and contribute to the community",
        "duration": "8-12 weeks",
        "resources": ["Portfolio projects", "Open source contributions", "Speaking opportunities"],
    },
]

SUGGESTED_SKILL_POOL: tuple[str, ...] = (
    "Machine Learning",
    "Cloud Computing",
    "Cybersecurity",
    "DevOps",
    "Blockchain",
    "React",
    "Node.js",
    "TypeScript",
    "Docker",
    "AWS",
)
