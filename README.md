# xlwgen

`xlwgen` reads a C++ interface header that declares plain functions. Comments
in the header describe the functions and their arguments. From the header,
`xlwgen` writes C++ source that registers each function with a spreadsheet
host and wraps it so the host can call it.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Writing an interface header

The header may contain only these things:

- function declarations
- preprocessor lines
- comments
- `using namespace x;` lines

Curly braces cause an error. Qualifiers such as `const` and `&` are ignored.

Write each declaration in this order:

1. the return type
2. a `//` comment that describes the function
3. the function name
4. the argument list

Each argument can have its own comment.

```cpp
//<xlw:libraryname=MyTestLibrary

short // echoes a short
EchoShort(short x // number to be echoed
       );
```

A function that returns `void` is registered as a command. Any other function
is registered as a worksheet function.

### Directives at file level

Each directive is written in a `//` comment.

| Directive | Effect |
| --- | --- |
| `<xlw:libraryname=NAME` | Sets the library name. The default is the input path. |
| `<xlw:timeall`, `<xlw:timenone` | Switch timing on or off for the functions that follow. A timed function appends a "time taken" row to its result. |
| `<xlw:onopen(fn)`, `<xlw:onclose(fn)` | Register `fn` to run when the add-in is opened or closed. |
| `<xlw:typeregister(new_type old_type converter)` | Registers an extra argument type. |

Any other `<xlw:` comment at file level is reported and then ignored.

### Directives for one function

These comments go between the description comment and the function name:

- `<xlw:volatile`
- `<xlw:time`
- `<xlw:threadsafe`
- `<xlw:macrosheet`
- `<xlw:clustersafe`
- `<xlw:help=ID`

`<xlw:asynchronous` is rejected with an error.

### Built-in argument types

- Native types:
  - `double`, `short`, `int`, `unsigned long` and `bool`
  - `string`, `std::string` and `std::wstring`
  - `CellMatrix`, `MyArray`, `MyMatrix` and `NEMatrix`
  - `XlfOper` and `reftest`
  - `DoubleOrNothing` and `ArgumentList`
- Managed wrappers also accept `DateTime`.

## Command line

```
xlwgen inputfile
xlwgen inputfile outputfile
xlwgen -m inputfile
xlwgen -m inputfile outputdirectory
```

If you give no output file, the generated source is written to the current
directory as `xlw<name>.cpp`. `<name>` is the input file name up to its first
dot.

Options:

- `-c` uses the prefix `clw` instead of `xlw`.
- `-m` first writes managed wrappers, `mxlw<name>.h` and `mxlw<name>.cpp`. It then generates the native registrations from the wrapper header. All three files go into the output directory if you give one. Otherwise they go into the directory of the input path, so give the input with a directory part.

Unknown options are reported and ignored.

On an error, the message is printed between `***ERROR***` lines and the exit
status is non-zero.

## Library use

The pipeline runs in these steps:

| Step | Function | Result |
| --- | --- | --- |
| 1 | `xlwgen.cli.read_source(path)` | the header text, with control characters and non-ASCII bytes replaced by spaces |
| 2 | `xlwgen.tokenizer.tokenize(text)` | a list of `Token` |
| 3 | `xlwgen.strip.strip_tokens(tokens)` | the tokens without `&` and `const`, with `unsigned long`, `unsigned int` and `unsigned short` joined |
| 4 | `xlwgen.functionizer.convert_to_function_model(tokens, library_name, registry)` | an `InterfaceSpec` holding functions, library name, open methods and close methods |
| 5 | `xlwgen.typer.function_typer(models, registry)` | a list of `FunctionDescription` |
| 6 | `xlwgen.outputter.create_output_file(descriptions, input_file_name, library_name, open_methods, close_methods, registry)` | the generated source as a string |

Other entry points:

- `xlwgen.managed_outputter.create_managed_output(...)` returns `(header, source)` for the managed wrappers.
- `xlwgen.registrations.default_registries()` returns a fresh `(native, managed)` pair of `TypeRegistry` objects.
- `xlwgen.errors.GeneratorError` is raised for every input, parse and output error.

## Cell containers

The package also provides containers for the data that add-in functions
receive:

- `xlwgen.cells.CellValue` and `xlwgen.cells.CellMatrix` hold empty, number, string, boolean and error cells.
- `xlwgen.double_or_nothing.DoubleOrNothing` reads a single cell that is either a number or empty.
- `xlwgen.arglist.ArgumentList` holds named arguments.
  - `ArgumentList.from_cells` reads a named-argument block laid out in cells.
  - `all_data()` lays the arguments out again in the same form.

Misuse of these containers raises `xlwgen.cells.XlwError`.

## What it does not do

`xlwgen` only writes C++ source. It does not compile that source. It does not
build or load an add-in, and it does not talk to a spreadsheet host. The cell
containers are plain Python data structures. They are not connected to any
host.