# tests/repomanager/config/test_config.py
from __future__ import annotations

import pytest

from repomanager.config.config import Config, KEYS
from repomanager.config.plugins import PluginDescriptor
from repomanager.core.errors import InvalidConfigError, NoSuchConfigKeyError, UnresolvedPlaceholderError


# ----------------------------
# get / set / remove
# ----------------------------

@pytest.mark.parametrize("key", [Config.REPO_DIR, Config.INSTALL_FILE, Config.REPO_CACHE, Config.GENERATED_REPO])
def test_config_setThenGetRaw_returnsStoredValue(key: str) -> None:
    config = Config()
    config.set(key, "some/path")

    assert config.get(key, resolve=False) == "some/path"
    assert config.get(key) == "some/path"


def test_config_unsetKey_returnsNone() -> None:
    assert Config().get(Config.REPO_DIR) is None


def test_config_unknownKey_raises() -> None:
    config = Config()
    with pytest.raises(NoSuchConfigKeyError):
        config.get("foo")
    with pytest.raises(NoSuchConfigKeyError):
        config.set("foo", "bar")


@pytest.mark.parametrize("value", [123, 1.5, True, {"a": 1}, ["x"]])
def test_config_pathKey_rejectsNonString(value: object) -> None:
    with pytest.raises(InvalidConfigError):
        Config().set(Config.REPO_DIR, value)


def test_config_pathKey_rejectsEmptyString() -> None:
    with pytest.raises(InvalidConfigError):
        Config().set(Config.REPO_CACHE, "")


def test_config_setNone_removesLocalValue() -> None:
    parent = Config(values={Config.REPO_DIR: "parent-dir"})
    config = Config(parent, {Config.REPO_DIR: "child-dir"})

    config.set(Config.REPO_DIR, None)

    assert config.get(Config.REPO_DIR) == "parent-dir"
    assert not config.contains(Config.REPO_DIR)


def test_config_remove_fallsBackToParent() -> None:
    parent = Config(values={Config.REPO_CACHE: "parent-cache"})
    config = Config(parent)
    config.set(Config.REPO_CACHE, "child-cache")

    config.remove(Config.REPO_CACHE)

    assert config.get(Config.REPO_CACHE) == parent.get(Config.REPO_CACHE)


def test_config_removeUnsetKey_isNoop() -> None:
    config = Config()
    config.remove(Config.REPO_DIR)
    assert config.isEmpty()


def test_config_fallbackDisabled_ignoresParent() -> None:
    parent = Config(values={Config.REPO_DIR: "parent-dir"})
    config = Config(parent)

    assert config.get(Config.REPO_DIR) == "parent-dir"
    assert config.get(Config.REPO_DIR, fallback=False) is None
    assert config.contains(Config.REPO_DIR, fallback=True)


def test_config_fallbackWalksWholeChain() -> None:
    grandparent = Config(values={Config.REPO_DIR: "top"})
    parent = Config(grandparent)
    config = Config(parent)

    assert config.get(Config.REPO_DIR) == "top"


def test_config_childDoesNotMutateParent() -> None:
    parent = Config(values={Config.REPO_DIR: "parent-dir"})
    config = Config(parent)

    config.set(Config.REPO_DIR, "child-dir")

    assert parent.get(Config.REPO_DIR) == "parent-dir"


def test_config_setParent_rejectsCycle() -> None:
    first = Config()
    second = Config(first)
    with pytest.raises(InvalidConfigError):
        first.setParent(second)


# ----------------------------
# Placeholders
# ----------------------------

def test_config_placeholder_resolvedAndRaw() -> None:
    config = Config()
    config.set(Config.REPO_DIR, "X")
    config.set(Config.REPO_CACHE, "{$repo-dir}/Y")

    assert config.get(Config.REPO_CACHE, resolve=True) == "X/Y"
    assert config.get(Config.REPO_CACHE, resolve=False) == "{$repo-dir}/Y"


def test_config_placeholder_resolvedThroughParent() -> None:
    parent = Config(values={Config.REPO_DIR: "parent-dir"})
    config = Config(parent, {Config.INSTALL_FILE: "{$repo-dir}/install.json5"})

    assert config.get(Config.INSTALL_FILE) == "parent-dir/install.json5"


def test_config_placeholderInParentValue_usesChildOverride() -> None:
    parent = Config.createDefault()
    config = Config(parent, {Config.REPO_DIR: "custom"})

    assert config.get(Config.INSTALL_FILE) == "custom/install-file.json5"
    assert parent.get(Config.INSTALL_FILE) == ".repo/install-file.json5"


def test_config_placeholder_innerValueResolvedFully() -> None:
    config = Config(values={
        Config.REPO_DIR: "root",
        Config.REPO_CACHE: "{$repo-dir}/cache",
        Config.GENERATED_REPO: "{$repo-cache}/repo.py",
    })

    assert config.get(Config.GENERATED_REPO) == "root/cache/repo.py"


def test_config_placeholder_multipleInOneValue() -> None:
    config = Config(values={
        Config.REPO_DIR: "a",
        Config.REPO_CACHE: "b",
        Config.GENERATED_REPO: "{$repo-dir}/{$repo-cache}/{$repo-dir}",
    })

    assert config.get(Config.GENERATED_REPO) == "a/b/a"


def test_config_placeholder_unsetKey_raises() -> None:
    config = Config(values={Config.REPO_CACHE: "{$repo-dir}/cache"})

    with pytest.raises(UnresolvedPlaceholderError) as excInfo:
        config.get(Config.REPO_CACHE)

    assert excInfo.value.placeholder == "repo-dir"
    # Raw reads never expand
    assert config.get(Config.REPO_CACHE, resolve=False) == "{$repo-dir}/cache"


def test_config_placeholder_unknownKey_raises() -> None:
    config = Config(values={Config.REPO_CACHE: "{$nope}/cache"})
    with pytest.raises(UnresolvedPlaceholderError):
        config.get(Config.REPO_CACHE)


def test_config_placeholder_cycle_raises() -> None:
    config = Config(values={
        Config.REPO_DIR: "{$repo-cache}",
        Config.REPO_CACHE: "{$repo-dir}",
    })
    with pytest.raises(UnresolvedPlaceholderError):
        config.get(Config.REPO_DIR)


def test_config_placeholder_listKey_raises() -> None:
    config = Config(values={Config.PLUGINS: ["a.B"], Config.REPO_DIR: "{$plugins}"})
    with pytest.raises(InvalidConfigError):
        config.get(Config.REPO_DIR)


def test_config_textWithoutPlaceholderSyntax_isKept() -> None:
    config = Config(values={Config.REPO_DIR: "{repo-dir}/$x"})
    assert config.get(Config.REPO_DIR) == "{repo-dir}/$x"


# ----------------------------
# Defaults / toDict / merge
# ----------------------------

def test_config_createDefault_resolvesAgainstRepoDir() -> None:
    config = Config.createDefault()

    assert config.get(Config.REPO_DIR) == ".repo"
    assert config.get(Config.INSTALL_FILE) == ".repo/install-file.json5"
    assert config.get(Config.PACKAGE_REPO_CONFIG) == ".repo/packages.json5"
    assert config.get(Config.REPO_CACHE) == ".repo/cache"
    assert config.get(Config.PLUGINS) is None


def test_config_toDict_keepsKeyOrderAndSkipsUnset() -> None:
    config = Config()
    config.set(Config.REPO_CACHE, "{$repo-dir}/cache")
    config.set(Config.REPO_DIR, "dir")

    assert list(config.toDict()) == [Config.REPO_DIR, Config.REPO_CACHE]
    assert config.toDict() == {Config.REPO_DIR: "dir", Config.REPO_CACHE: "{$repo-dir}/cache"}
    assert config.toDict(resolve=True) == {Config.REPO_DIR: "dir", Config.REPO_CACHE: "dir/cache"}


def test_config_toDict_fallbackIncludesParentValues() -> None:
    parent = Config(values={Config.REPO_DIR: "p"})
    config = Config(parent, {Config.REPO_CACHE: "c"})

    assert config.toDict() == {Config.REPO_CACHE: "c"}
    assert config.toDict(fallback=True) == {Config.REPO_DIR: "p", Config.REPO_CACHE: "c"}


def test_config_replace_isAtomicOnInvalidValue() -> None:
    config = Config(values={Config.REPO_DIR: "dir"})

    with pytest.raises(InvalidConfigError):
        config.replace({Config.REPO_CACHE: "cache", Config.INSTALL_FILE: ""})

    assert config.toDict() == {Config.REPO_DIR: "dir"}


def test_config_keys_areFixed() -> None:
    assert Config.PLUGINS in KEYS
    assert Config.isValidKey(Config.REPO_DIR)
    assert not Config.isValidKey("repo_dir")


# ----------------------------
# Plugin classes
# ----------------------------

def test_config_pluginList_stripsLeadingSeparatorsAndDedupes() -> None:
    config = Config()
    config.set(Config.PLUGINS, ["\\Vendor\\Plugin", "/vendor.plugin", "Vendor\\Plugin", "vendor.plugin"])

    assert config.get(Config.PLUGINS) == ["Vendor\\Plugin", "vendor.plugin"]


@pytest.mark.parametrize("value", ["vendor.Plugin", [""], ["\\"], [1]])
def test_config_pluginList_rejectsInvalidValues(value: object) -> None:
    with pytest.raises(InvalidConfigError):
        Config().set(Config.PLUGINS, value)


def test_config_pluginList_returnedCopyIsDetached() -> None:
    config = Config(values={Config.PLUGINS: ["a.Plugin"]})
    plugins = config.get(Config.PLUGINS)
    plugins.append("b.Plugin")

    assert config.get(Config.PLUGINS) == ["a.Plugin"]


def test_config_addPluginClass_storesValidatedIdentifier() -> None:
    config = Config()
    config.addPluginClass(PluginDescriptor("\\acme.plugins.MyPlugin"))
    config.addPluginClass(PluginDescriptor("acme.plugins.MyPlugin"))
    config.addPluginClass(PluginDescriptor("acme.plugins.Other"))

    assert config.getPluginClasses() == ["acme.plugins.MyPlugin", "acme.plugins.Other"]


@pytest.mark.parametrize(
    "descriptor",
    [
        PluginDescriptor("acme.PluginProtocol", isClass=False),
        PluginDescriptor("acme.NotAPlugin", implementsPlugin=False),
        PluginDescriptor("acme.NeedsArgs", requiresArguments=True),
        PluginDescriptor(""),
    ],
)
def test_config_addPluginClass_rejectsInvalidDescriptor(descriptor: PluginDescriptor) -> None:
    config = Config()
    with pytest.raises(InvalidConfigError):
        config.addPluginClass(descriptor)
    assert config.getPluginClasses() == []


def test_config_addPluginClass_extendsInheritedList() -> None:
    parent = Config(values={Config.PLUGINS: ["acme.Base"]})
    config = Config(parent)

    config.addPluginClass(PluginDescriptor("acme.Extra"))

    assert config.getPluginClasses() == ["acme.Base", "acme.Extra"]
    assert parent.getPluginClasses() == ["acme.Base"]


def test_config_removePluginClass() -> None:
    config = Config()
    config.setPluginClasses([PluginDescriptor("a.One"), PluginDescriptor("b.Two")])

    config.removePluginClass("\\a.One")
    config.removePluginClass("unknown.Plugin")

    assert config.getPluginClasses() == ["b.Two"]


def test_config_merge_isAtomicOnInvalidValue() -> None:
    config = Config(values={Config.REPO_DIR: "dir"})

    with pytest.raises(InvalidConfigError):
        config.merge({Config.REPO_DIR: "other", Config.REPO_CACHE: "cache", Config.INSTALL_FILE: ""})

    assert config.toDict() == {Config.REPO_DIR: "dir"}


def test_config_merge_unknownKeyLeavesValuesUntouched() -> None:
    config = Config()

    with pytest.raises(NoSuchConfigKeyError):
        config.merge({Config.REPO_DIR: "dir", "no-such-key": "x"})

    assert config.isEmpty()
