"""Label table shared by every host language.

Output grammars list labels in this order, so it must stay stable: reorder
only together with a regeneration of the shipped grammars.
"""

from __future__ import annotations

from tmglel.grammar.models import Label

LABELS: tuple[Label, ...] = (
    Label("css", "source.css", "css|css.erb"),
    Label("html", "text.html.basic", "html|htm|shtml|xhtml|inc|tmpl|tpl"),
    Label("ini", "source.ini", "ini|conf"),
    Label("java", "source.java", "java|bsh"),
    Label("lua", "source.lua", "lua"),
    Label("makefile", "source.makefile", "Makefile|makefile|GNUmakefile|OCamlMakefile"),
    Label("perl", "source.perl", "perl|pl|pm|pod|t|PL|psgi|vcl"),
    Label("r", "source.r", "R|r|s|S|Rprofile|\\{\\.r.+?\\}"),
    Label(
        "ruby",
        "source.ruby",
        "ruby|rb|rbx|rjs|Rakefile|rake|cgi|fcgi|gemspec|irbrc|Capfile|ru|prawn|Cheffile"
        "|Gemfile|Guardfile|Hobofile|Vagrantfile|Appraisals|Rantfile|Berksfile|Berksfile.lock"
        "|Thorfile|Puppetfile",
    ),
    Label(
        "php",
        "source.php",
        "php|php3|php4|php5|phpt|phtml|aw|ctp",
        patterns="\n  - include: text.html.basic",
    ),
    Label("sql", "source.sql", "sql|ddl|dml"),
    Label("vs_net", "source.asp.vb.net", "vb"),
    Label("xml", "text.xml", "xml|xsd|tld|jsp|pt|cpt|dtml|rss|opml"),
    Label("xsl", "text.xml.xsl", "xsl|xslt"),
    Label("yaml", "source.yaml", "yaml|yml"),
    Label("dosbatch", "source.batchfile", "bat|batch"),
    Label("clojure", "source.clojure", "clj|cljs|clojure"),
    Label("coffee", "source.coffee", "coffee|Cakefile|coffee.erb"),
    Label("c", "source.c", "c|h"),
    Label("cpp", "source.cpp", "cpp|c\\+\\+|cxx"),
    Label("diff", "source.diff", "patch|diff|rej"),
    Label("dockerfile", "source.dockerfile", "dockerfile|Dockerfile"),
    Label("git_commit", "text.git-commit", "COMMIT_EDITMSG|MERGE_MSG"),
    Label("git_rebase", "text.git-rebase", "git-rebase-todo"),
    Label("go", "source.go", "go|golang"),
    Label("groovy", "source.groovy", "groovy|gvy"),
    Label("pug", "text.pug", "jade|pug"),
    Label("javascript", "source.js", "js|jsx|javascript|es6|mjs|cjs|dataviewjs|\\{\\.js.+?\\}"),
    Label("js_regexp", "source.js.regexp", "regexp"),
    Label(
        "json",
        "source.json",
        "json|json5|sublime-settings|sublime-menu|sublime-keymap|sublime-mousemap"
        "|sublime-theme|sublime-build|sublime-project|sublime-completions",
    ),
    Label("jsonc", "source.json.comments", "jsonc"),
    Label("less", "source.css.less", "less"),
    Label("objc", "source.objc", "objectivec|objective-c|mm|objc|obj-c|m|h"),
    Label("swift", "source.swift", "swift"),
    Label("scss", "source.css.scss", "scss"),
    Label("perl6", "source.perl.6", "perl6|p6|pl6|pm6|nqp"),
    Label("powershell", "source.powershell", "powershell|ps1|psm1|psd1|pwsh"),
    Label(
        "python",
        "source.python",
        "python|py|py3|rpy|pyw|cpy|SConstruct|Sconstruct|sconstruct|SConscript|gyp|gypi"
        "|\\{\\.python.+?\\}",
    ),
    Label("julia", "source.julia", "julia|\\{\\.julia.+?\\}"),
    Label("regexp_python", "source.regexp.python", "re"),
    Label("rust", "source.rust", "rust|rs|\\{\\.rust.+?\\}"),
    Label("scala", "source.scala", "scala|sbt"),
    Label(
        "shellscript",
        "source.shell",
        "shell|sh|bash|zsh|bashrc|bash_profile|bash_login|profile|bash_logout|.textmate_init"
        "|\\{\\.bash.+?\\}",
    ),
    Label("typescript", "source.ts", "typescript|ts"),
    Label("typescriptreact", "source.tsx", "tsx"),
    Label("csharp", "source.cs", "cs|csharp|c#"),
    Label("fsharp", "source.fsharp", "fs|fsharp|f#"),
    Label("dart", "source.dart", "dart"),
    Label("handlebars", "text.html.handlebars", "handlebars|hbs"),
    Label("markdown", "text.html.markdown", "markdown|md"),
    Label("log", "text.log", "log"),
    Label("erlang", "source.erlang", "erlang"),
    Label("elixir", "source.elixir", "elixir"),
    Label("latex", "text.tex.latex", "latex|tex"),
    Label("bibtex", "text.bibtex", "bibtex"),
    Label("twig", "source.twig", "twig"),
    # scopes contributed by third-party extensions
    Label("reaper", "source.txt", "reaper"),  # vscode-reaper-theme
    Label("rhai", "source.rhai", "rhai"),  # vscode-rhai
    Label("toml", "source.toml", "toml"),  # even-better-toml
)
