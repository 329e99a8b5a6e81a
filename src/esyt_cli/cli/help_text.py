"""Usage text printed for ``-h`` / ``--help`` / ``help``."""

USAGE = """
Usage: esyt [framework] [language] [projectName] [packages...] [options]

Tokens are order-independent. The first bare token is the project name.

Positional
  projectName                 First unrecognized token without spaces becomes the
                              project name. Example: esyt my-app
  -                           Placeholder, ignored

Framework / language
  -vite, --vite, vite         Create a Vite project
  -next, --next, next         Create a Next.js project
  -js, --js, js               Use JavaScript (also -javascript, --javascript, javascript)
  -ts, --ts, ts               Use TypeScript (also -typescript, --typescript, typescript)

Packages
  Any token starting with -- or with a single - followed by more than one
  character is a package token. Examples: --tailwindcss -tailwindcss --dotenv
  Once the project name is set, further bare tokens are packages as well.
  Unknown package names are installed verbatim.

Install / Git / Editor / Dev
  -git                        Initialize a git repository
  -i, -install, --install     Run the package manager's install step
  -dev                        Run the development server after install
  -zed, -code, -cursor, -trae Open the project in Zed, VSCode, Cursor or Trae

Negations (explicit overrides)
  --no-git, -no-git           Disable git init
  --no-install, -no-install, --no-i, -no-i
                              Disable the install step
  --no-dev, -no-dev           Disable the dev server
  --no-editor, -no-editor, --no-ide, -no-ide
                              Do not open an editor (editor set to 'None')
  Other --no-... tokens are ignored.

Automation
  --yes, -y, --no-interactive Accept defaults and skip prompts. Explicit flags
                              such as --no-git still win over the defaults.
                              Defaults can be changed in $ESYT_HOME/config.yaml.
  --dry-run, -d               Print commands instead of running them

Help / version
  -h, --help, help            Print this help text and exit
  -v, --version, version      Print the version and exit

Examples
  esyt -vite -ts my-app --tailwindcss -git -i -code
  esyt my-app --next --yes --no-git
"""

__all__ = ["USAGE"]
