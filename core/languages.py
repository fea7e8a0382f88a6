from typing import NamedTuple


class Language(NamedTuple):
    label: str
    starter_code: str


# selector order matches the editor dropdown
LANGUAGES: dict[str, Language] = {
    "java": Language(
        label="☕ Java",
        starter_code="""// Java Playground
public class Main {
    public static void main(String[] args) {
        System.out.println("Hello, World!");
    }
}""",
    ),
    "cpp": Language(
        label="🟦 C++",
        starter_code="""// C++ Playground
#include <iostream>
using namespace std;

int main() {
    cout << "Hello, World!" << endl;
    return 0;
}""",
    ),
    "javascript": Language(
        label="🟨 JavaScript",
        starter_code="""// JavaScript Playground
console.log("Hello, World!");""",
    ),
}


def is_supported(language: str) -> bool:
    return language in LANGUAGES


def starter_code(language: str) -> str:
    return LANGUAGES[language].starter_code
