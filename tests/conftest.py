from pathlib import Path

import pytest

BUILD_GRADLE = """\
apply plugin: 'com.android.application'

android {
    namespace "com.example.app"
    compileSdkVersion rootProject.ext.compileSdkVersion
    defaultConfig {
        applicationId "com.example.app"
        minSdkVersion rootProject.ext.minSdkVersion
        targetSdkVersion rootProject.ext.targetSdkVersion
        versionCode 1
        versionName "1.0"
        testInstrumentationRunner "androidx.test.runner.AndroidJUnitRunner"
    }
}
"""


@pytest.fixture
def android_app(tmp_path: Path) -> Path:
    """A capacitor-style ``android/app`` directory holding an unpatched build.gradle."""
    app_dir = tmp_path / "android" / "app"
    app_dir.mkdir(parents=True)
    (app_dir / "build.gradle").write_text(BUILD_GRADLE, encoding="utf-8")
    return app_dir


@pytest.fixture
def build_gradle_text() -> str:
    return BUILD_GRADLE
