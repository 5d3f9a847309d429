import pkgutil
import importlib
import jokes.sources

# 自动导入 sources 目录下的所有笑话来源
for _, modname, _ in pkgutil.iter_modules(jokes.sources.__path__):
    importlib.import_module(f"jokes.sources.{modname}")
